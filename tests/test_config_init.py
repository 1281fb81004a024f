import config_init


def test_clean_domain_strips_scheme_path_and_port():
    assert config_init._clean_domain(" HTTPS://Example.com:443/path?q=1 ") == "example.com"
    assert config_init._clean_domain("example.com.") == "example.com"


def test_project_yaml_uses_python_runtime():
    text = config_init.build_pulumi_project_yaml("interactive-resume")
    assert text.splitlines()[0] == "name: interactive-resume"
    assert "  name: python" in text
    assert "    virtualenv: .venv" in text


def test_stack_yaml_is_sorted_commented_and_secret_free():
    prefix = "interactive-resume"
    text = config_init.build_stack_yaml(prefix, {
        f"{prefix}:sitePath": "site",
        "aws:region": "us-east-1",
        f"{prefix}:domain": "example.com",
    })
    lines = text.splitlines()

    assert lines[0] == "config:"
    keys = [line.strip().rsplit(": ", 1)[0] for line in lines[1:] if line.strip() and not line.strip().startswith("#")]
    assert keys == sorted(keys)
    assert "  # AWS region for the bucket and distribution" in lines
    assert "certificateArn" not in text


def test_write_text_refuses_to_overwrite_without_force(tmp_path):
    target = tmp_path / "Pulumi.dev.yaml"
    assert config_init.write_text(target, "a", force=False) is True
    assert config_init.write_text(target, "b", force=False) is False
    assert target.read_text(encoding="utf-8") == "a"
    assert config_init.write_text(target, "b", force=True) is True
    assert target.read_text(encoding="utf-8") == "b"


def test_default_domain_run_writes_files_without_secrets(tmp_path, monkeypatch):
    monkeypatch.setattr(config_init, "repo_root_from_scripts_dir", lambda: tmp_path)
    monkeypatch.setattr("builtins.input", lambda prompt: "")
    calls = []
    monkeypatch.setattr(config_init, "_pulumi_run", calls.append)

    assert config_init.main(["--stack", "dev", "--region", "eu-west-2"]) == 0

    assert (tmp_path / "Pulumi.yaml").exists()
    stack_yaml = (tmp_path / "Pulumi.dev.yaml").read_text(encoding="utf-8")
    assert "  aws:region: eu-west-2" in stack_yaml
    assert "  interactive-resume:domain: interactive-resume" in stack_yaml
    assert calls == []


def test_custom_domain_injects_certificate_as_secret(tmp_path, monkeypatch):
    monkeypatch.setattr(config_init, "repo_root_from_scripts_dir", lambda: tmp_path)
    arn = "arn:aws:acm:us-east-1:123456789012:certificate/abc"
    monkeypatch.setattr("builtins.input", lambda prompt: arn if prompt.startswith("certificateArn") else "")
    calls = []
    monkeypatch.setattr(config_init, "_pulumi_run", calls.append)

    config_init.main(["--domain", "example.com", "--inject-secrets"])

    assert ["pulumi", "config", "set", "interactive-resume:certificateArn", "--secret", arn] in calls
    assert arn not in (tmp_path / "Pulumi.dev.yaml").read_text(encoding="utf-8")
