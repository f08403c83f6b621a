import hashlib
import os
import xml.etree.ElementTree as ET
from datetime import datetime, timezone

import pytest

from mavenhost.modules.artifactrepo.domain import Project
from mavenhost.modules.artifactrepo.metadata import checksum, metadata_xml, pom_xml

POM_NS = "{http://maven.apache.org/POM/4.0.0}"


def test_metadata_xml_single_version():
    now = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    root = ET.fromstring(metadata_xml("com.example", "demo", "1.2.3", now=now))

    assert root.findtext("groupId") == "com.example"
    assert root.findtext("artifactId") == "demo"
    assert root.findtext("versioning/latest") == "1.2.3"
    assert root.findtext("versioning/release") == "1.2.3"
    assert [v.text for v in root.findall("versioning/versions/version")] == ["1.2.3"]
    assert root.findtext("versioning/lastUpdated") == "20240102030405"


def test_metadata_xml_escapes_values():
    root = ET.fromstring(metadata_xml("com.example", "a<b", "1.0"))

    assert root.findtext("artifactId") == "a<b"


def test_pom_xml_is_minimal_jar():
    root = ET.fromstring(pom_xml("com.example", "demo", "1.2.3"))

    assert root.findtext(f"{POM_NS}modelVersion") == "4.0.0"
    assert root.findtext(f"{POM_NS}groupId") == "com.example"
    assert root.findtext(f"{POM_NS}artifactId") == "demo"
    assert root.findtext(f"{POM_NS}version") == "1.2.3"
    assert root.findtext(f"{POM_NS}packaging") == "jar"
    assert root.find(f"{POM_NS}dependencies") is None


def test_checksum_digests():
    assert checksum("demo", 1234, "sha1") == hashlib.sha1(b"demo-1234").hexdigest()
    assert checksum("demo", 1234, "md5") == hashlib.md5(b"demo-1234").hexdigest()


def test_checksum_rejects_unknown_algorithm():
    with pytest.raises(ValueError):
        checksum("demo", 1234, "sha256")


def test_checksum_tracks_directory_mtime(tmp_path):
    project_dir = tmp_path / "demo"
    project_dir.mkdir()
    os.utime(project_dir, ns=(1_700_000_000_000_000_000, 1_700_000_000_000_000_000))
    project = Project(name="demo", path=project_dir)

    first = checksum(project.name, project.modified_millis, "sha1")
    second = checksum(project.name, project.modified_millis, "sha1")
    assert first == second

    os.utime(project_dir, ns=(1_700_000_005_000_000_000, 1_700_000_005_000_000_000))
    assert checksum(project.name, project.modified_millis, "sha1") != first
