import pytest

from statica import FileSystemProvider


@pytest.fixture
def nested(site_dir):
    docs = site_dir / "docs"
    docs.mkdir()
    (docs / "index.html").write_text("docs index", encoding="utf-8")
    (site_dir / "empty").mkdir()
    (site_dir.parent / "secret.txt").write_text("secret", encoding="utf-8")
    return site_dir


def test_resolves_file(provider, site_dir, run):
    found = run(provider.resolve("/style.css"))
    assert found.path == site_dir / "style.css"
    assert found.name == "style.css"
    assert found.size == 6


def test_resolves_directory_to_index(provider, nested, run):
    assert run(provider.resolve("/")).name == "index.html"
    assert run(provider.resolve("/docs")).path == nested / "docs" / "index.html"
    assert run(provider.resolve("/docs/")).path == nested / "docs" / "index.html"


@pytest.mark.parametrize(
    "path",
    [
        pytest.param("/missing.html", id="missing file"),
        pytest.param("/empty", id="directory without index"),
        pytest.param("/style.css/child", id="file used as directory"),
        pytest.param("/../secret.txt", id="parent traversal"),
        pytest.param("/docs/../../secret.txt", id="nested traversal"),
    ],
)
def test_not_found(provider, nested, run, path):
    assert run(provider.resolve(path)) is None


def test_custom_index(site_dir, run):
    (site_dir / "home.htm").write_text("home", encoding="utf-8")
    provider = FileSystemProvider(site_dir, index="home.htm")
    assert run(provider.resolve("/")).name == "home.htm"


def test_read_and_stream(provider, site_dir, run):
    payload = bytes(range(256)) * 300
    (site_dir / "blob.bin").write_bytes(payload)
    found = run(provider.resolve("/blob.bin"))

    async def collect():
        return [chunk async for chunk in found.stream(chunk_size=1000)]

    chunks = run(collect())
    assert b"".join(chunks) == payload
    assert max(len(chunk) for chunk in chunks) == 1000
    assert run(found.read()) == payload


def test_percent_sign_in_file_name(site_dir, provider, run):
    (site_dir / "x%ab.txt").write_text("literal", encoding="utf-8")
    found = run(provider.resolve("/x%ab.txt"))
    assert found.path == site_dir / "x%ab.txt"
