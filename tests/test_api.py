import io
import zipfile

import httpx
from fastapi.testclient import TestClient

from mavenhost.bootstrap import ServiceContainer
from mavenhost.factory import create_app
from mavenhost.modules.artifactrepo.domain import ProjectMetadata
from mavenhost.modules.artifactrepo.exceptions import PackagingFailure
from mavenhost.settings import Settings


def build_client(tmp_path, **overrides):
    defaults = {
        "projects_dir": str(tmp_path / "projects"),
        "default_group_id": "com.example",
        "repository_base_path": "/repo",
    }
    defaults.update(overrides)
    settings = Settings(_env_file=None, **defaults)

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[])

    services = ServiceContainer(settings, http_client=httpx.Client(transport=httpx.MockTransport(handler)))
    upload = tmp_path / "upload"
    (upload / "src/main").mkdir(parents=True)
    (upload / "src/main/Foo.java").write_text("class Foo {}")
    services.project_store.create(
        "demo",
        upload,
        ProjectMetadata(
            original_filename="demo-v1.2.3.zip",
            uploaded_at="2024-01-01T00:00:00Z",
            uploaded_by="alice",
        ),
    )
    return TestClient(create_app(settings, services=services)), services


def test_health(tmp_path):
    client, _ = build_client(tmp_path)

    assert client.get("/health").json() == {"status": "ok"}


def test_artifact_listing(tmp_path):
    client, _ = build_client(tmp_path)

    resp = client.get("/repo/api/artifacts")

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["repositoryUrl"].endswith("/repo")
    (artifact,) = payload["artifacts"]
    assert artifact["artifactId"] == "demo"
    assert artifact["groupId"] == "com.example"
    assert artifact["version"] == "1.2.3"
    assert artifact["sourceRootRelativePath"] == "src/main"
    assert artifact["mavenPath"] == "/com/example/demo/1.2.3"
    assert artifact["dependencyDeclarationBlocks"]["gradle"] == "implementation 'com.example:demo:1.2.3'"


def test_download_jar(tmp_path):
    client, _ = build_client(tmp_path)

    resp = client.get("/repo/com/example/demo/1.2.3/demo-1.2.3.jar")

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/java-archive"
    assert resp.headers["content-disposition"] == 'attachment; filename="demo-1.2.3.jar"'
    with zipfile.ZipFile(io.BytesIO(resp.content)) as zf:
        assert zf.namelist() == ["Foo.java"]


def test_maven_metadata(tmp_path):
    client, _ = build_client(tmp_path)

    resp = client.get("/repo/com/example/demo/1.2.3/maven-metadata.xml")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/xml")
    assert "<latest>1.2.3</latest>" in resp.text
    assert "<release>1.2.3</release>" in resp.text


def test_checksum_and_pom(tmp_path):
    client, _ = build_client(tmp_path)

    sha1 = client.get("/repo/com/example/demo/1.2.3/demo-1.2.3.jar.sha1")
    pom = client.get("/repo/com/example/demo/1.2.3/demo-1.2.3.pom")

    assert sha1.status_code == 200
    assert len(sha1.text) == 40
    assert pom.status_code == 200
    assert "<packaging>jar</packaging>" in pom.text


def test_direct_file(tmp_path):
    client, _ = build_client(tmp_path)

    resp = client.get("/repo/com/example/demo/1.2.3/Foo.java")

    assert resp.status_code == 200
    assert resp.text == "class Foo {}"


def test_not_found_responses_are_identical(tmp_path):
    client, _ = build_client(tmp_path)

    short = client.get("/repo/demo/1.2.3/demo.jar")
    missing = client.get("/repo/com/example/nope/1.0/nope-1.0.jar")
    sidecar = client.get("/repo/com/example/demo/1.2.3/.project-meta.json")

    for resp in (short, missing, sidecar):
        assert resp.status_code == 404
        assert resp.text == "Not found"


def test_packaging_failure_is_500(tmp_path, monkeypatch):
    client, services = build_client(tmp_path)

    def broken_pack(_root):
        raise PackagingFailure("gone")

    monkeypatch.setattr(services.dispatcher.packager, "pack", broken_pack)

    resp = client.get("/repo/com/example/demo/1.2.3/demo-1.2.3.jar")

    assert resp.status_code == 500


def test_project_endpoints_open_without_tokens(tmp_path):
    client, _ = build_client(tmp_path)

    projects = client.get("/files/api/projects").json()["projects"]
    detail = client.get("/files/api/projects/demo").json()
    content = client.get("/files/api/projects/demo/file", params={"path": "src/main/Foo.java"}).json()

    assert projects[0]["name"] == "demo"
    assert projects[0]["uploadedBy"] == "alice"
    assert detail["meta"]["version"] == "1.2.3"
    assert content["content"] == "class Foo {}"


def test_project_file_errors(tmp_path):
    client, _ = build_client(tmp_path)

    assert client.get("/files/api/projects/demo/file").status_code == 400
    assert client.get("/files/api/projects/demo/file", params={"path": "../../upload/src"}).status_code == 403
    assert client.get("/files/api/projects/demo/file", params={"path": "nope.txt"}).status_code == 404
    assert client.get("/files/api/projects/nope").status_code == 404


def test_capability_gates(tmp_path):
    client, services = build_client(tmp_path, api_tokens=["user-token"], admin_tokens=["admin-token"])

    assert client.get("/files/api/projects").status_code == 401
    assert client.get("/files/api/projects", headers={"X-Api-Token": "user-token"}).status_code == 200
    assert client.get("/files/api/projects", headers={"X-Api-Token": "admin-token"}).status_code == 200

    denied = client.delete("/files/api/projects/demo", headers={"X-Api-Token": "user-token"})
    assert denied.status_code == 403
    assert services.project_store.exists("demo")

    deleted = client.delete("/files/api/projects/demo", headers={"X-Api-Token": "admin-token"})
    assert deleted.json() == {"success": True, "message": "Project deleted"}
    assert not services.project_store.exists("demo")

    missing = client.delete("/files/api/projects/demo", headers={"X-Api-Token": "admin-token"})
    assert missing.status_code == 404


def test_repository_is_public(tmp_path):
    client, _ = build_client(tmp_path, api_tokens=["user-token"])

    assert client.get("/repo/com/example/demo/1.2.3/demo-1.2.3.pom").status_code == 200
