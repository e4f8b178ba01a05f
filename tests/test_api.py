import pytest


pytestmark = pytest.mark.api


def test_convert_json(client):
    response = client.post("/api/convert", json={
        "input_text": "g]kfn",
        "input_font": "preeti",
        "output_font": "unicode",
    })
    assert response.status_code == 200
    assert response.get_json() == {
        "success": True,
        "result": "नेपाल",
        "input_font": "preeti",
        "output_font": "unicode",
    }
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_convert_form(client):
    response = client.post("/api/convert", data={
        "input_text": "ls!",
        "input_font": "preeti",
        "output_font": "hisab",
    })
    assert response.status_code == 200
    assert response.get_json()["result"] == "ls1"


def test_convert_raw_body_uses_defaults(client):
    response = client.post("/api/convert", data="ls", content_type="text/plain")
    assert response.status_code == 200
    data = response.get_json()
    assert data["result"] == "कि"
    assert (data["input_font"], data["output_font"]) == ("preeti", "unicode")


def test_convert_empty_text(client):
    response = client.post("/api/convert", json={"input_text": ""})
    assert response.status_code == 200
    assert response.get_json()["result"] == ""


def test_convert_invalid_font(client):
    response = client.post("/api/convert", json={"input_text": "ls", "input_font": "unicode"})
    assert response.status_code == 400
    data = response.get_json()
    assert data["success"] is False
    assert "input font" in data["error"]


def test_convert_too_large(client, service, monkeypatch):
    monkeypatch.setattr(service, "max_input_length", 2)
    response = client.post("/api/convert", json={"input_text": "sss"})
    assert response.status_code == 413
    assert response.get_json()["success"] is False


def test_convert_preflight(client):
    response = client.open("/api/convert", method="OPTIONS")
    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Methods"] == "POST"


def test_fonts(client):
    response = client.get("/api/fonts")
    data = response.get_json()
    assert data["fonts"]["unicode"] == "Unicode"
    assert data["input_fonts"] == ["preeti", "hisab"]
    assert data["default_output_font"] == "unicode"


def test_health(client):
    assert client.get("/api/health").get_json() == {"status": "ok"}


def test_index_page(client):
    response = client.get("/")
    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "Preeti" in body
    assert 'value="unicode" selected' in body


def test_convert_bad_text_type(client):
    response = client.post("/api/convert", json={"input_text": ["ls"]})
    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_convert_unexpected_error(client, service, monkeypatch):
    import unicode_converter

    def broken(data):
        raise RuntimeError("table missing")

    logged = []
    monkeypatch.setattr(service, "handle", broken)
    monkeypatch.setattr(unicode_converter.app.logger, "exception", lambda msg, *args, **kwargs: logged.append(msg))

    response = client.post("/api/convert", json={"input_text": "ls"})
    assert response.status_code == 500
    data = response.get_json()
    assert data["success"] is False
    assert "table missing" in data["error"]
    assert logged == ["Conversion failed"]
