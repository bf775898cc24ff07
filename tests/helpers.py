"""Builders for project trees and configuration used across the tests."""

from pathlib import Path
from typing import Iterable, Optional


POM_TEMPLATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <groupId>com.example</groupId>
  <artifactId>{artifact_id}</artifactId>
{packaging}{modules}</project>
"""


def write_pom(directory: Path, artifact_id: str, packaging: Optional[str] = None,
              modules: Iterable[str] = ()) -> Path:
    """Write a minimal pom.xml into ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    packaging_xml = f"  <packaging>{packaging}</packaging>\n" if packaging else ""
    modules = list(modules)
    modules_xml = ""
    if modules:
        modules_xml = "  <modules>\n" + "".join(
            f"    <module>{m}</module>\n" for m in modules
        ) + "  </modules>\n"
    pom = directory / "pom.xml"
    pom.write_text(POM_TEMPLATE.format(
        artifact_id=artifact_id, packaging=packaging_xml, modules=modules_xml,
    ))
    return pom


def project_data(base_path: Path, wildfly_root: Path, **overrides) -> dict:
    """Configuration mapping for a single project."""
    data = {
        "base_path": str(base_path),
        "wildfly_root": str(wildfly_root),
        "wildfly_mode": "standalone",
        "modules": {"core": "", "webapp": "", "auth": "modules/org/auth/main"},
    }
    data.update(overrides)
    return data


class FakeRunner:
    """Records commands instead of running them."""

    def __init__(self, fail_on: Optional[str] = None, error: Optional[Exception] = None):
        self.calls = []
        self.fail_on = fail_on
        self.error = error

    def run(self, args, cwd=None, timeout=None):
        self.calls.append((tuple(args), cwd, timeout))
        if self.fail_on is not None and self.fail_on in args:
            raise self.error
