import pulumi

from assets import scan_site_assets
from helpers import DeploymentContext
from site_config import SiteConfiguration
from site_outputs import DeploymentOutputs, compute_deployment_outputs, export_deployment_outputs
from workload_certs import site_aliases, site_viewer_certificate
from workload_cloudfront import create_cloudfront_distribution
from workload_s3_site import (
    attach_oai_read_policy,
    create_origin_access_identity,
    create_site_bucket,
    upload_site_assets,
)


def deploy_static_site(
    *,
    site: SiteConfiguration,
    ctx: DeploymentContext,
) -> DeploymentOutputs:
    """
    Declare the whole site: bucket + objects, OAI, distribution, bucket policy.

    The site directory is scanned before anything is declared, so a missing
    directory fails the program without touching the bucket. Ordering
    between resources comes from the Output references; nothing here waits.
    """
    site_assets = scan_site_assets(site.site_path)

    if site.domain.is_custom:
        pulumi.log.info(f"Serving on custom domain {site.domain.name}")
    else:
        pulumi.log.info("Serving on the CloudFront default domain")

    # -------------------------------------------------------------------
    # S3 site bucket + objects
    # -------------------------------------------------------------------
    site_bucket = create_site_bucket(
        ctx=ctx,
        index_document=site.index_document,
        error_document=site.error_document,
    )

    upload_site_assets(
        ctx=ctx,
        site_bucket=site_bucket,
        site_assets=site_assets,
    )

    # -------------------------------------------------------------------
    # Origin access identity
    # -------------------------------------------------------------------
    oai = create_origin_access_identity(ctx=ctx)

    # -------------------------------------------------------------------
    # CloudFront distribution
    # -------------------------------------------------------------------
    aliases = site_aliases(site.domain)

    dist = create_cloudfront_distribution(
        ctx=ctx,
        index_document=site.index_document,
        error_document=site.error_document,
        aliases=aliases,
        viewer_cert=site_viewer_certificate(site.domain),
        site_bucket=site_bucket,
        oai=oai,
    )

    attach_oai_read_policy(
        ctx=ctx,
        site_bucket=site_bucket,
        oai=oai,
    )

    outputs = compute_deployment_outputs(
        domain=site.domain,
        site_bucket=site_bucket,
        dist=dist,
    )
    export_deployment_outputs(outputs)

    pulumi.export("customDomainEnabled", site.domain.is_custom)
    pulumi.export("aliases", aliases)

    return outputs
