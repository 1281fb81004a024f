import pulumi_aws as aws


def make_provider(
    *,
    region: str,
    account_id: str | None = None,
    role_name: str | None = None,
    profile: str | None = None,
) -> aws.Provider:
    """
    Explicit AWS provider for every resource in this project.

    When account_id and role_name are both given the provider assumes
    arn:aws:iam::<account_id>:role/<role_name>; otherwise it uses the
    ambient credentials (optionally a named CLI profile).
    """
    kwargs = {}
    if account_id and role_name:
        kwargs["assume_role"] = aws.ProviderAssumeRoleArgs(
            role_arn=f"arn:aws:iam::{account_id}:role/{role_name}",
            session_name="pulumi",
        )

    return aws.Provider(
        "target",
        region=region,
        profile=profile,
        **kwargs,
    )
