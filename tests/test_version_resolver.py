import httpx
import pytest

from mavenhost.modules.artifactrepo.version import (
    UpstreamTagClient,
    VersionContext,
    VersionResolver,
    latest_tag_version,
    version_from_filename,
)
from mavenhost.settings import Settings


class FakeTagClient:
    def __init__(self, tags):
        self.tags = tags
        self.calls = []

    def list_tags(self, upstream_url):
        self.calls.append(upstream_url)
        return self.tags


def build_settings(tmp_path, **overrides) -> Settings:
    defaults = {
        "projects_dir": str(tmp_path / "projects"),
        "github_api_url": "https://api.github.test",
    }
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("demo-v1.2.3.zip", "1.2.3"),
        ("demo-1.2.3.zip", "1.2.3"),
        ("demo-v2.1.zip", "2.1"),
        ("demo-2.1", "2.1"),
        ("release_v3.4.5_final.zip", "3.4.5"),
        ("tool_v3.4_final.zip", "3.4"),
        ("lib_1.2.3_build.tar.gz", "1.2.3"),
        ("demo.zip", None),
        (None, None),
    ],
)
def test_version_from_filename(filename, expected):
    assert version_from_filename(filename) == expected


def test_latest_tag_version_sorts_numerically():
    tags = ["v1.2.0", "v1.10.0", "1.9", "nightly", "v2.0.0-rc1"]

    assert latest_tag_version(tags) == "1.10.0"


def test_latest_tag_version_treats_missing_patch_as_zero():
    assert latest_tag_version(["1.2", "v1.2.1", "v1.1.9"]) == "1.2.1"
    assert latest_tag_version(["snapshot"]) is None


def test_explicit_version_wins():
    resolver = VersionResolver(tag_client=FakeTagClient(["v9.0.0"]))

    context = VersionContext(explicit_version="7.0.0", original_filename="demo-v1.0.0.zip")

    assert resolver.resolve(context) == "7.0.0"


def test_filename_wins_over_upstream_tags():
    tags = FakeTagClient(["v3.0.0"])
    resolver = VersionResolver(tag_client=tags)

    context = VersionContext(
        original_filename="demo-v2.0.1.zip",
        upstream_url="https://github.com/acme/demo",
    )

    assert resolver.resolve(context) == "2.0.1"
    assert tags.calls == []


def test_upstream_tags_used_when_filename_has_no_version(tmp_path):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/repos/acme/demo/tags"
        return httpx.Response(200, json=[{"name": "v1.0.0"}, {"name": "v1.4.2"}, {"name": "nightly"}])

    client = httpx.Client(transport=httpx.MockTransport(handler))
    resolver = VersionResolver(tag_client=UpstreamTagClient(build_settings(tmp_path), client=client))

    context = VersionContext(original_filename="demo.zip", upstream_url="https://github.com/acme/demo.git")

    assert resolver.resolve(context) == "1.4.2"


def test_upstream_failure_falls_back_to_build_properties(tmp_path):
    source = tmp_path / "source"
    source.mkdir()
    (source / "gradle.properties").write_text("group=com.acme\nversion=5.6.7\n")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    resolver = VersionResolver(tag_client=UpstreamTagClient(build_settings(tmp_path), client=client))

    context = VersionContext(upstream_url="https://github.com/acme/demo", source_dir=source)

    assert resolver.resolve(context) == "5.6.7"


def test_build_properties_skips_invalid_values(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    (tmp_path / "a" / "gradle.properties").write_text("version=not-a-version\n")
    (tmp_path / "b" / "gradle.properties").write_text("version = 4.5.6-beta.1\n")

    context = VersionContext(source_dir=tmp_path)

    assert VersionResolver().resolve(context) == "4.5.6-beta.1"


def test_build_properties_prefers_shallow_file(tmp_path):
    (tmp_path / "module").mkdir()
    (tmp_path / "gradle.properties").write_text("version=1.0\n")
    (tmp_path / "module" / "gradle.properties").write_text("version=2.0\n")

    assert VersionResolver().resolve(VersionContext(source_dir=tmp_path)) == "1.0"


def test_build_properties_ignores_hidden_directories(tmp_path):
    (tmp_path / ".gradle").mkdir()
    (tmp_path / ".gradle" / "gradle.properties").write_text("version=9.9.9\n")

    assert VersionResolver().resolve(VersionContext(source_dir=tmp_path)) is None


def test_nothing_resolves():
    assert VersionResolver().resolve(VersionContext(original_filename="demo.zip")) is None
