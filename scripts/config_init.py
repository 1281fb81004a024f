#!/usr/bin/env python3
from __future__ import annotations

import argparse
import re
import subprocess
from pathlib import Path

PROJECT_NAME = "interactive-resume"
DEFAULT_DOMAIN = "interactive-resume"


def repo_root_from_scripts_dir() -> Path:
    return Path(__file__).resolve().parents[1]


def _clean_domain(domain: str) -> str:
    d = domain.strip().lower()
    d = re.sub(r"^https?://", "", d)
    d = re.split(r"[/?#]", d, maxsplit=1)[0]
    d = re.sub(r":\d+$", "", d)
    d = d.rstrip(".")
    return d


def prompt_with_default(label: str, default: str, explain: str = "") -> str:
    if explain:
        print(explain)
    v = input(f"{label} [{default}]: ").strip()
    return v if v else default


def prompt_required(label: str, example: str, explain: str = "") -> str:
    if explain:
        print(explain)
    while True:
        v = input(f"{label} (e.g. {example}): ").strip()
        if v:
            return v


def write_text(path: Path, content: str, force: bool) -> bool:
    if path.exists() and not force:
        return False
    path.write_text(content, encoding="utf-8", newline="\n")
    return True


def build_pulumi_project_yaml(project_name: str) -> str:
    lines: list[str] = []
    lines.append(f"name: {project_name}")
    lines.append("description: Static website on S3 behind CloudFront")
    lines.append("runtime:")
    lines.append("  name: python")
    lines.append("  options:")
    lines.append("    toolchain: pip")
    lines.append("    virtualenv: .venv")
    lines.append("")
    return "\n".join(lines)


def build_sorted_config_yaml(values: dict[str, str], comments: dict[str, str]) -> str:
    lines: list[str] = ["config:"]
    for key in sorted(values.keys()):
        if key in comments:
            lines.append(f"  # {comments[key]}")
        lines.append(f"  {key}: {values[key]}")
    lines.append("")
    return "\n".join(lines)


def build_stack_yaml(prefix: str, values: dict[str, str]) -> str:
    comments = {
        "aws:profile": "AWS CLI profile used by the Pulumi AWS provider",
        "aws:region": "AWS region for the bucket and distribution",
        f"{prefix}:domain": f"Custom domain, or '{DEFAULT_DOMAIN}' for the CloudFront domain",
        f"{prefix}:errorDocument": "Page served for 404s (bucket website and CloudFront)",
        f"{prefix}:indexDocument": "Bucket website index document and CloudFront root object",
        f"{prefix}:sitePath": "Local directory with the built site, relative to the repo root",
        # certificateArn intentionally NOT written here
    }
    return build_sorted_config_yaml(values, comments)


def _pulumi_run(args: list[str]) -> None:
    subprocess.run(args, check=True)


def pulumi_set_certificate_arn(stack: str, prefix: str, certificate_arn: str) -> None:
    """
    Uses Pulumi CLI so the ARN is stored as a secure: value in Pulumi.<stack>.yaml.
    """
    print(f"\n[Secrets] Selecting stack: {stack}")
    _pulumi_run(["pulumi", "stack", "select", stack, "--create"])
    print("[Secrets] Setting certificateArn (secure)...")
    _pulumi_run(["pulumi", "config", "set", f"{prefix}:certificateArn", "--secret", certificate_arn])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Initialize Pulumi project and stack config in repo root.")
    parser.add_argument("--stack", default="dev", help="Pulumi stack name (default: dev)")
    parser.add_argument("--domain", help=f"Custom domain, e.g. example.com (default: {DEFAULT_DOMAIN})")
    parser.add_argument("--region", help="AWS region (if omitted, you will be prompted). Example: eu-west-2")
    parser.add_argument("--profile", help="AWS CLI profile (if omitted, you will be prompted).")
    parser.add_argument("--force", action="store_true", help="Overwrite existing YAML files")
    parser.add_argument(
        "--inject-secrets",
        action="store_true",
        help="Store certificateArn as a secret via Pulumi CLI (custom domains only)",
    )
    args = parser.parse_args(argv)

    domain = _clean_domain(args.domain) if args.domain else DEFAULT_DOMAIN
    prefix = PROJECT_NAME
    root = repo_root_from_scripts_dir()

    print("\n=== config_init.py ===")
    print("Phase 1: write readable YAML files (no secrets in these files).")
    print("Phase 2 (optional): store certificateArn via Pulumi CLI as a secure: value.")

    region = prompt_with_default(
        "Deploy region",
        args.region.strip() if args.region else "us-east-1",
        explain="AWS region used for the bucket and the provider.",
    )
    profile = prompt_with_default(
        "AWS profile",
        args.profile.strip() if args.profile else "default",
        explain="AWS CLI profile used by the Pulumi provider.",
    )
    site_path = prompt_with_default("sitePath", "site", explain="Directory holding the built site files.")
    index_document = prompt_with_default("indexDocument", "index.html")
    error_document = prompt_with_default("errorDocument", "error.html")

    written: list[str] = []
    skipped: list[str] = []

    pulumi_yaml_path = root / "Pulumi.yaml"
    if write_text(pulumi_yaml_path, build_pulumi_project_yaml(PROJECT_NAME), force=args.force):
        written.append(pulumi_yaml_path.name)
    else:
        skipped.append(pulumi_yaml_path.name)

    stack_values = {
        "aws:profile": profile,
        "aws:region": region,
        f"{prefix}:domain": domain,
        f"{prefix}:errorDocument": error_document,
        f"{prefix}:indexDocument": index_document,
        f"{prefix}:sitePath": site_path,
    }
    stack_path = root / f"Pulumi.{args.stack}.yaml"
    if write_text(stack_path, build_stack_yaml(prefix, stack_values), force=args.force):
        written.append(stack_path.name)
    else:
        skipped.append(stack_path.name)

    print("\n=== Phase 1 Summary (files) ===")
    print(f"Domain: {domain}")
    if written:
        print("\nWritten/Updated:")
        for name in written:
            print(f"  - {name}")
    if skipped:
        print("\nSkipped (already exist, use --force to overwrite):")
        for name in skipped:
            print(f"  - {name}")

    if domain == DEFAULT_DOMAIN:
        print("\n(Phase 2 skipped) Default domain uses the CloudFront certificate; no secrets needed.")
    elif args.inject_secrets:
        certificate_arn = prompt_required(
            "certificateArn",
            "arn:aws:acm:us-east-1:123456789012:certificate/...",
            explain=f"ACM certificate (us-east-1) covering {domain}.",
        )
        pulumi_set_certificate_arn(args.stack, prefix, certificate_arn)
    else:
        print("\n(Phase 2 skipped) A custom domain needs certificateArn. Re-run with --inject-secrets, or:")
        print(f"  pulumi config set --secret {prefix}:certificateArn <arn>")

    print("")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
