from dataclasses import dataclass, field
import re

import pulumi
import pulumi_aws as aws

PROJECT_TAG = "interactive-resume"

# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------

def clean_domain(domain: str) -> str:
    d = (domain or "").strip().lower()
    d = re.sub(r"^https?://", "", d)
    d = re.split(r"[/?#]", d, maxsplit=1)[0]
    return d.rstrip(".")


def base_tags(stack: str) -> dict[str, str]:
    return {"Project": PROJECT_TAG, "ManagedBy": "Pulumi", "Env": stack}


@dataclass(frozen=True)
class DeploymentContext:
    """
    Everything a resource-declaring function needs besides its own inputs.

    name_prefix is the configured domain (or the default sentinel) and
    prefixes every logical resource name.
    """
    name_prefix: str
    stack: str
    provider: aws.Provider | None = None
    tags: dict[str, str] = field(default_factory=dict)

    def opts(self) -> pulumi.ResourceOptions:
        return pulumi.ResourceOptions(provider=self.provider)
