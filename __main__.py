from pathlib import Path

import pulumi

from helpers import DeploymentContext, base_tags
from providers import make_provider
from site_config import load_site_configuration
from workload_static_site import deploy_static_site

cfg = pulumi.Config()
aws_cfg = pulumi.Config("aws")

# -------------------------------------------------------------------
# Config (validated before any resource is declared)
# -------------------------------------------------------------------
site = load_site_configuration(cfg, aws_cfg, program_dir=Path(__file__).parent)

stack = pulumi.get_stack()
pulumi.export("stack", stack)

target_provider = make_provider(
    region=site.region,
    account_id=site.account_id,
    role_name=site.deploy_role_name,
    profile=site.profile,
)

ctx = DeploymentContext(
    name_prefix=site.domain.name,
    stack=stack,
    provider=target_provider,
    tags=base_tags(stack),
)

deploy_static_site(site=site, ctx=ctx)
