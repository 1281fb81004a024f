from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from site_config import CustomDomain, SiteDomain


@dataclass(frozen=True)
class DeploymentOutputs:
    bucket_name: pulumi.Output
    bucket_website_endpoint: pulumi.Output
    cdn_domain: pulumi.Output
    website_url: pulumi.Output
    s3_website_url: pulumi.Output


def website_url(domain: SiteDomain, cdn_domain: str) -> str:
    if isinstance(domain, CustomDomain):
        return f"https://{domain.name}"
    return f"https://{cdn_domain}"


def compute_deployment_outputs(
    *,
    domain: SiteDomain,
    site_bucket: aws.s3.Bucket,
    dist: aws.cloudfront.Distribution,
) -> DeploymentOutputs:
    return DeploymentOutputs(
        bucket_name=site_bucket.id,
        bucket_website_endpoint=site_bucket.website_endpoint,
        cdn_domain=dist.domain_name,
        website_url=dist.domain_name.apply(lambda d: website_url(domain, d)),
        s3_website_url=pulumi.Output.concat("http://", site_bucket.website_endpoint),
    )


def export_deployment_outputs(outputs: DeploymentOutputs) -> None:
    pulumi.export("bucketName", outputs.bucket_name)
    pulumi.export("bucketWebsiteEndpoint", outputs.bucket_website_endpoint)
    pulumi.export("cdnDomain", outputs.cdn_domain)
    pulumi.export("websiteUrl", outputs.website_url)
    pulumi.export("s3WebsiteUrl", outputs.s3_website_url)
