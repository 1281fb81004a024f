import pulumi_aws as aws

from site_config import CustomDomain, SiteDomain


def site_aliases(domain: SiteDomain) -> list[str]:
    """CloudFront aliases: [domain] for a custom domain, none for the default one."""
    if isinstance(domain, CustomDomain):
        return [domain.name]
    return []


def site_viewer_certificate(domain: SiteDomain) -> aws.cloudfront.DistributionViewerCertificateArgs:
    """
    Viewer cert for the distribution.

    Default domain -> CloudFront default certificate, no ACM ARN.
    Custom domain  -> caller-supplied ACM certificate (must live in us-east-1), SNI only.
    """
    if not isinstance(domain, CustomDomain):
        return aws.cloudfront.DistributionViewerCertificateArgs(cloudfront_default_certificate=True)

    return aws.cloudfront.DistributionViewerCertificateArgs(
        cloudfront_default_certificate=False,
        acm_certificate_arn=domain.certificate_arn,
        ssl_support_method="sni-only",
        minimum_protocol_version="TLSv1.2_2021",
    )
