import pytest

from helpers import pom_xml


@pytest.fixture
def write_pom(tmp_path):
    def _write(relative_dir, artifact, **kwargs):
        folder = tmp_path / relative_dir
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / "pom.xml"
        path.write_text(pom_xml(artifact, **kwargs), encoding="utf-8")
        return path
    return _write
