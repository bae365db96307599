import pytest

from staticserve.app import create_app


@pytest.fixture
def public_dir(tmp_path):
    public = tmp_path / "public"
    (public / "nested").mkdir(parents=True)
    (public / "index.html").write_bytes(b"<h1>home</h1>\n")
    (public / "style.css").write_bytes(b"body { color: red; }\n")
    (public / "nested" / "page.html").write_bytes(b"<p>nested</p>\n")
    (public / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")
    (tmp_path / "secret.txt").write_bytes(b"do not serve")
    return public


@pytest.fixture
def client(public_dir):
    app = create_app(str(public_dir))
    app.config["TESTING"] = True
    return app.test_client()
