"""Static site tests."""

from studyhub.services.static_site import StaticSite, headers_for


def test_subject_guide_pdf(client):
    response = client.get("/maths12-guide/chapter1.pdf")
    assert response.status_code == 200
    assert response.content == b"%PDF-1.4 maths"
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["cross-origin-resource-policy"] == "cross-origin"
    assert response.headers["cross-origin-embedder-policy"] == "unsafe-none"


def test_subject_guide_json(client):
    response = client.get("/science12-guide/index.json")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"chapters": 3}
    assert response.headers["cross-origin-resource-policy"] == "cross-origin"


def test_build_asset(client):
    response = client.get("/static/app.js")
    assert response.status_code == 200
    assert "cross-origin-resource-policy" not in response.headers


def test_public_asset(client):
    response = client.get("/robots.txt")
    assert response.status_code == 200
    assert response.text == "User-agent: *"


def test_unknown_path_serves_app_shell(client):
    for path in ("/", "/courses/maths", "/maths12-guide/missing.pdf"):
        response = client.get(path)
        assert response.status_code == 200
        assert response.text == "<html>app shell</html>"


def test_missing_shell_returns_404(tmp_path):
    site = StaticSite(build_dir=tmp_path / "build", public_dir=tmp_path / "public", subject_guides=[])
    assert site.resolve_or_shell("anything") is None


def test_path_traversal_is_rejected(site_dirs):
    assert site_dirs.resolve("../secret.txt") is None
    assert site_dirs.resolve("maths12-guide/../../secret.txt") is None


def test_headers_for():
    assert headers_for("guide.PDF")[0] == "application/pdf"
    assert headers_for("data.json")[0] == "application/json"
    assert headers_for("index.html") == (None, {})
