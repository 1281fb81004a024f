import pulumi
import pulumi_aws as aws

from helpers import DeploymentContext

MIN_TTL = 0
DEFAULT_TTL = 3600
MAX_TTL = 86400


def create_cloudfront_distribution(
    *,
    ctx: DeploymentContext,
    # site settings
    index_document: str,
    error_document: str,
    aliases: list[str],
    viewer_cert: aws.cloudfront.DistributionViewerCertificateArgs,
    # origin
    site_bucket: aws.s3.Bucket,
    oai: aws.cloudfront.OriginAccessIdentity,
) -> aws.cloudfront.Distribution:
    """
    Single-origin distribution in front of the site bucket's website endpoint.

    The origin authenticates with the OAI access path, so the distribution is
    only created after the OAI exists. Edge rollout is slow; the resource
    resolving does not mean every edge location is serving yet.
    """
    origin_id = site_bucket.arn

    dist = aws.cloudfront.Distribution(
        f"{ctx.name_prefix}-cdn",
        enabled=True,
        default_root_object=index_document,
        aliases=aliases or None,
        origins=[
            aws.cloudfront.DistributionOriginArgs(
                origin_id=origin_id,
                domain_name=site_bucket.website_endpoint,
                s3_origin_config=aws.cloudfront.DistributionOriginS3OriginConfigArgs(
                    origin_access_identity=oai.cloudfront_access_identity_path,
                ),
            ),
        ],
        default_cache_behavior=aws.cloudfront.DistributionDefaultCacheBehaviorArgs(
            target_origin_id=origin_id,
            viewer_protocol_policy="redirect-to-https",
            allowed_methods=["GET", "HEAD", "OPTIONS"],
            cached_methods=["GET", "HEAD"],
            forwarded_values=aws.cloudfront.DistributionDefaultCacheBehaviorForwardedValuesArgs(
                query_string=False,
                cookies=aws.cloudfront.DistributionDefaultCacheBehaviorForwardedValuesCookiesArgs(
                    forward="none"
                ),
            ),
            min_ttl=MIN_TTL,
            default_ttl=DEFAULT_TTL,
            max_ttl=MAX_TTL,
            compress=True,
        ),
        price_class="PriceClass_100",
        restrictions=aws.cloudfront.DistributionRestrictionsArgs(
            geo_restriction=aws.cloudfront.DistributionRestrictionsGeoRestrictionArgs(
                restriction_type="none"
            )
        ),
        viewer_certificate=viewer_cert,
        custom_error_responses=[
            aws.cloudfront.DistributionCustomErrorResponseArgs(
                error_code=404,
                response_code=404,
                response_page_path=f"/{error_document}",
            )
        ],
        tags=ctx.tags,
        opts=ctx.opts(),
    )

    pulumi.export("cloudFrontZoneId", dist.hosted_zone_id)
    pulumi.export("cloudFrontDistId", dist.id)

    return dist
