from __future__ import annotations


class TestEditorPaletteAPI:
    def test_palette(self, client):
        """GET /api/palette returns the block-editor palette."""
        response = client.get("/api/palette")
        assert response.status_code == 200
        data = response.get_json()
        assert [entry["slug"] for entry in data["palette"]] == [
            "accent", "background", "text-color", "highlight",
        ]
        assert data["palette"][0] == {"name": "Sunset orange", "slug": "accent", "color": "#ff6600"}
        assert data["disable_custom_colors"] is True

    def test_permissive_allows_custom_colors(self, make_app):
        client = make_app(strict=False).test_client()
        assert client.get("/api/palette").get_json()["disable_custom_colors"] is False

    def test_cors_header(self, client):
        response = client.get("/api/palette")
        assert response.headers["Access-Control-Allow-Origin"] == "*"

    def test_disabled(self, make_app):
        client = make_app(surfaces=("legacy",)).test_client()
        response = client.get("/api/palette")
        assert response.status_code == 404
        assert "disabled" in response.get_json()["error"]


class TestLegacyPaletteAPI:
    def test_strict(self, client):
        data = client.get("/api/palette/legacy").get_json()
        assert data["textcolor_map"] == [
            "ff6600", "Sunset orange",
            "fafafa", "Paper",
            "rgb(34, 34, 34)", "Text-color",
            "ff0", "Highlight",
        ]
        assert data["textcolor_rows"] == 1
        assert data["textcolor_cols"] == 4
        assert data["colorpicker"] is False

    def test_permissive_insert_with_extra(self, make_app):
        client = make_app(strict=False, extra=[("#123456", "Extra")]).test_client()
        data = client.get("/api/palette/legacy").get_json()
        assert data["textcolor_map"][8:10] == ["123456", "Extra"]
        assert data["textcolor_map"][10:12] == ["000000", "Black"]
        assert len(data["textcolor_map"]) == 78 + 10
        assert data["textcolor_cols"] == 8
        assert data["colorpicker"] is True

    def test_disabled(self, make_app):
        client = make_app(surfaces=("blocks",)).test_client()
        assert client.get("/api/palette/legacy").status_code == 404


class TestClientSettingsAPI:
    def test_settings(self, client):
        data = client.get("/api/palette/client").get_json()
        assert data["settings"] == {"strict": True, "mimic": True}
        assert data["color_codes"] == ["#ff6600", "#fafafa", "rgb(34, 34, 34)", "#ffff00"]
        assert data["custom_color_text"] == "Custom color"
        assert len(data["palette"]) == 4

    def test_disabled(self, make_app):
        client = make_app(surfaces=("blocks", "legacy")).test_client()
        assert client.get("/api/palette/client").status_code == 404


class TestRefreshAPI:
    def test_refresh_rescans(self, client, theme_css):
        assert len(client.get("/api/palette").get_json()["palette"]) == 4
        theme_css.write_text(":root { --accent: #000; }")
        response = client.post("/api/palette/refresh")
        assert response.status_code == 200
        assert response.get_json() == {"colors": 1, "slugs": ["accent"]}
        assert client.get("/api/palette").get_json()["palette"] == [
            {"name": "Accent", "slug": "accent", "color": "#000"}
        ]

    def test_get_not_allowed(self, client):
        assert client.get("/api/palette/refresh").status_code == 405


class TestStylesheetChanges:
    def test_edit_is_served_without_refresh(self, client, theme_css, clock, set_mtime):
        """An edited stylesheet shows up on the next GET."""
        first = client.get("/api/palette").get_json()["palette"]
        assert first[0]["color"] == "#ff6600"
        clock.advance(60)
        theme_css.write_text(":root { --accent: #222222; }")
        set_mtime(theme_css, clock.now)
        second = client.get("/api/palette").get_json()["palette"]
        assert second == [{"name": "Accent", "slug": "accent", "color": "#222222"}]

    def test_unchanged_stylesheet_keeps_palette(self, client, theme_css, clock):
        first = client.get("/api/palette").get_json()
        clock.advance(60)
        assert client.get("/api/palette").get_json() == first


class TestParseErrors:
    def test_api_reports_parse_error(self, make_app, broken_css):
        client = make_app(stylesheet=broken_css).test_client()
        response = client.get("/api/palette")
        assert response.status_code == 500
        data = response.get_json()
        assert data["error"].startswith("Invalid stylesheet")
        assert data["line"] == 3

    def test_refresh_keeps_cached_palette(self, client, theme_css):
        client.get("/api/palette")
        theme_css.write_text(":root { --accent: \"oops; }")
        response = client.post("/api/palette/refresh")
        assert response.status_code == 200
        assert response.get_json()["colors"] == 4

    def test_css_reports_parse_error(self, make_app, broken_css):
        client = make_app(stylesheet=broken_css).test_client()
        response = client.get("/palette.css")
        assert response.status_code == 500
        assert response.mimetype == "text/css"
        assert response.get_data(as_text=True).startswith("/* Invalid stylesheet")


class TestPaletteCss:
    def test_classes(self, client):
        response = client.get("/palette.css")
        assert response.status_code == 200
        assert response.mimetype == "text/css"
        body = response.get_data(as_text=True)
        assert ".has-accent-color { color: #ff6600; }" in body
        assert ".has-highlight-background-color { background-color: #ff0; }" in body
        assert body.count("\n") == 8
