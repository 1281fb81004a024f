import json

import pulumi
import pytest

BUCKET_TYPE = "aws:s3/bucket:Bucket"
OBJECT_TYPE = "aws:s3/bucketObject:BucketObject"
POLICY_TYPE = "aws:s3/bucketPolicy:BucketPolicy"
OAI_TYPE = "aws:cloudfront/originAccessIdentity:OriginAccessIdentity"
DIST_TYPE = "aws:cloudfront/distribution:Distribution"
POLICY_DOCUMENT_TOKEN = "aws:iam/getPolicyDocument:getPolicyDocument"

CDN_DOMAIN = "d111111abcdef8.cloudfront.net"

# marker the engine uses for secret values inside mock inputs
SECRET_SIG_KEY = "4dabf18193072939515e22adb298388d"
SECRET_SIG = "1b47061264138c4ac30d75fd1eb44270"


def unwrap_secrets(value):
    if isinstance(value, dict):
        if value.get(SECRET_SIG_KEY) == SECRET_SIG:
            return unwrap_secrets(value.get("value"))
        return {k: unwrap_secrets(v) for k, v in value.items()}
    if isinstance(value, list):
        return [unwrap_secrets(v) for v in value]
    return value


def _one_or_many(values):
    return values[0] if len(values) == 1 else values


def render_policy_document(statements) -> str:
    """Renders getPolicyDocument arguments the way IAM prints them."""
    rendered = []
    for s in statements or []:
        statement = {"Effect": s.get("effect", "Allow")}
        if s.get("sid"):
            statement["Sid"] = s["sid"]
        statement["Action"] = _one_or_many(s.get("actions", []))
        statement["Resource"] = _one_or_many(s.get("resources", []))
        for p in s.get("principals", []):
            statement.setdefault("Principal", {})[p["type"]] = _one_or_many(p["identifiers"])
        rendered.append(statement)
    return json.dumps({"Version": "2012-10-17", "Statement": rendered})


class SiteMocks(pulumi.runtime.Mocks):
    """Echoes inputs back as outputs, fills in the computed attributes we read, and records every resource."""

    def __init__(self):
        self.registered = []
        self.calls = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        outputs = dict(args.inputs)
        if args.typ == BUCKET_TYPE:
            outputs["arn"] = f"arn:aws:s3:::{args.name}"
            outputs["bucket"] = args.name
            outputs["websiteEndpoint"] = f"{args.name}.s3-website-us-east-1.amazonaws.com"
        elif args.typ == OAI_TYPE:
            outputs["iamArn"] = f"arn:aws:iam::cloudfront:user/CloudFront Origin Access Identity {args.name}"
            outputs["cloudfrontAccessIdentityPath"] = f"origin-access-identity/cloudfront/{args.name}"
        elif args.typ == DIST_TYPE:
            outputs["arn"] = f"arn:aws:cloudfront::123456789012:distribution/{args.name}"
            outputs["domainName"] = CDN_DOMAIN
            outputs["hostedZoneId"] = "Z2FDTNDATAQYW2"

        self.registered.append((args.typ, args.name, unwrap_secrets(dict(args.inputs))))
        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        inputs = unwrap_secrets(dict(args.args))
        self.calls.append((args.token, inputs))
        if args.token == POLICY_DOCUMENT_TOKEN:
            return {"id": "policy-document", "json": render_policy_document(inputs.get("statements"))}
        return {}

    def of_type(self, typ: str) -> dict[str, dict]:
        return {name: inputs for t, name, inputs in self.registered if t == typ}


class FakeConfig:
    """Stands in for pulumi.Config."""

    def __init__(self, values: dict[str, str]):
        self.values = values

    def get(self, key: str):
        return self.values.get(key)


@pytest.fixture
def mocks():
    m = SiteMocks()
    pulumi.runtime.set_mocks(m, project="interactive-resume", stack="test", preview=False)
    return m


@pytest.fixture
def site_dir(tmp_path):
    d = tmp_path / "site"
    d.mkdir()
    (d / "index.html").write_text("<h1>hi</h1>", encoding="utf-8")
    (d / "style.css").write_text("body { margin: 0; }", encoding="utf-8")
    (d / "logo.svg").write_text("<svg xmlns='http://www.w3.org/2000/svg'/>", encoding="utf-8")
    return d


@pytest.fixture
def aws_config():
    return FakeConfig({"region": "us-east-1"})


@pytest.fixture
def base_values(site_dir):
    return {
        "sitePath": str(site_dir),
        "indexDocument": "index.html",
        "errorDocument": "error.html",
    }
