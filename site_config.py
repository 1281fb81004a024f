from dataclasses import dataclass
from pathlib import Path

import pulumi

from helpers import clean_domain
from site_errors import ConfigurationError

DEFAULT_DOMAIN = "interactive-resume"


@dataclass(frozen=True)
class DefaultDomain:
    """Serve on the CloudFront-assigned domain with the default certificate."""

    @property
    def name(self) -> str:
        return DEFAULT_DOMAIN

    @property
    def is_custom(self) -> bool:
        return False


@dataclass(frozen=True)
class CustomDomain:
    """Serve on a caller-owned domain with an ACM certificate (us-east-1)."""
    name: str
    certificate_arn: pulumi.Output

    @property
    def is_custom(self) -> bool:
        return True


SiteDomain = DefaultDomain | CustomDomain


@dataclass(frozen=True)
class SiteConfiguration:
    region: str
    site_path: Path
    index_document: str
    error_document: str
    domain: SiteDomain
    account_id: str | None = None
    deploy_role_name: str | None = None
    profile: str | None = None


def _required(cfg, key: str, label: str | None = None) -> str:
    v = (cfg.get(key) or "").strip()
    if not v:
        raise ConfigurationError(f"Missing config: {label or key}")
    return v


def _optional(cfg, key: str) -> str | None:
    v = (cfg.get(key) or "").strip()
    return v or None


def load_domain(cfg) -> SiteDomain:
    """
    DefaultDomain when `domain` is unset or equals the sentinel, otherwise
    CustomDomain, which requires a non-blank `certificateArn` (kept secret).
    """
    name = clean_domain(cfg.get("domain") or "")
    if not name or name == DEFAULT_DOMAIN:
        return DefaultDomain()

    # read plain so a blank value fails here; wrapped as a secret right after
    certificate_arn = (cfg.get("certificateArn") or "").strip()
    if not certificate_arn:
        raise ConfigurationError(
            f"Missing config: certificateArn (required when domain is '{name}'); "
            "set it with `pulumi config set --secret certificateArn <arn>`"
        )
    return CustomDomain(name=name, certificate_arn=pulumi.Output.secret(certificate_arn))


def load_site_configuration(cfg, aws_cfg, *, program_dir: Path) -> SiteConfiguration:
    """
    Read and validate stack config. Fails fast with ConfigurationError
    before anything is declared.

    `cfg` is the project pulumi.Config, `aws_cfg` is pulumi.Config("aws").
    sitePath is resolved relative to program_dir.
    """
    region = _required(aws_cfg, "region", "aws:region")
    site_path = Path(_required(cfg, "sitePath"))
    index_document = _required(cfg, "indexDocument")
    error_document = _required(cfg, "errorDocument")

    account_id = _optional(cfg, "accountId")
    deploy_role_name = _optional(cfg, "deployRoleName")
    if bool(account_id) != bool(deploy_role_name):
        raise ConfigurationError("accountId and deployRoleName must be set together")

    domain = load_domain(cfg)

    if not site_path.is_absolute():
        site_path = Path(program_dir) / site_path

    return SiteConfiguration(
        region=region,
        site_path=site_path,
        index_document=index_document.lstrip("/"),
        error_document=error_document.lstrip("/"),
        domain=domain,
        account_id=account_id,
        deploy_role_name=deploy_role_name,
        profile=_optional(aws_cfg, "profile"),
    )
