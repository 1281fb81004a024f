import pulumi
import pulumi_aws as aws

from assets import Asset
from helpers import DeploymentContext
from site_errors import AttributeResolutionError


def create_site_bucket(
    *,
    ctx: DeploymentContext,
    index_document: str,
    error_document: str,
) -> aws.s3.Bucket:
    """
    Site content bucket: website hosting on, ACL private.
    Objects are only readable through the CloudFront OAI (see attach_oai_read_policy).
    """
    return aws.s3.Bucket(
        f"{ctx.name_prefix}-bucket",
        website=aws.s3.BucketWebsiteArgs(
            index_document=index_document,
            error_document=error_document,
        ),
        acl="private",
        tags=ctx.tags,
        opts=ctx.opts(),
    )


def upload_site_assets(
    *,
    ctx: DeploymentContext,
    site_bucket: aws.s3.Bucket,
    site_assets: list[Asset],
) -> dict[str, aws.s3.BucketObject]:
    """
    One BucketObject per asset, keyed by its relative path.

    source_hash pins the object to the file's sha256, so an unchanged file is
    a no-op on the next `pulumi up`.

    Returns:
      {relative_path: bucket_object}
    """
    objects: dict[str, aws.s3.BucketObject] = {}
    for asset in site_assets:
        pulumi.log.debug(f"Declaring object {asset.relative_path} ({asset.content_type})")
        objects[asset.relative_path] = aws.s3.BucketObject(
            asset.relative_path,
            bucket=site_bucket.id,
            key=asset.relative_path,
            source=pulumi.FileAsset(str(asset.source)),
            source_hash=asset.digest,
            content_type=asset.content_type,
            opts=ctx.opts(),
        )
    return objects


def create_origin_access_identity(*, ctx: DeploymentContext) -> aws.cloudfront.OriginAccessIdentity:
    return aws.cloudfront.OriginAccessIdentity(
        f"{ctx.name_prefix}-oai",
        comment=f"OAI for {ctx.name_prefix}",
        opts=ctx.opts(),
    )


def require_policy_inputs(oai_arn: str, bucket_arn: str) -> tuple[str, str]:
    if not oai_arn:
        raise AttributeResolutionError("Origin access identity principal did not resolve")
    if not bucket_arn:
        raise AttributeResolutionError("Site bucket ARN did not resolve")
    return oai_arn, bucket_arn


def attach_oai_read_policy(
    *,
    ctx: DeploymentContext,
    site_bucket: aws.s3.Bucket,
    oai: aws.cloudfront.OriginAccessIdentity,
) -> aws.s3.BucketPolicy:
    """
    Bucket policy: allow only the OAI to read objects (s3:GetObject on <bucket_arn>/*).

    The document is built once both the OAI principal and the bucket ARN
    have resolved.
    """
    resolved = pulumi.Output.all(oai.iam_arn, site_bucket.arn).apply(
        lambda args: require_policy_inputs(args[0], args[1])
    )

    bucket_policy_doc = aws.iam.get_policy_document_output(statements=[
        aws.iam.GetPolicyDocumentStatementArgs(
            sid="AllowOaiRead",
            effect="Allow",
            actions=["s3:GetObject"],
            resources=[resolved.apply(lambda r: f"{r[1]}/*")],
            principals=[aws.iam.GetPolicyDocumentStatementPrincipalArgs(
                type="AWS",
                identifiers=[resolved.apply(lambda r: r[0])],
            )],
        )
    ], opts=pulumi.InvokeOptions(provider=ctx.provider))

    return aws.s3.BucketPolicy(
        f"{ctx.name_prefix}-bucket-policy",
        bucket=site_bucket.id,
        policy=bucket_policy_doc.json,
        opts=ctx.opts(),
    )
