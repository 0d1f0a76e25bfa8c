"""
Test suite for the Jinja2 integration.

Verifies that tags render unescaped under autoescape and that helpers
returning nothing render as empty strings.
"""

import json

from jinja2 import Environment

from vite_assets import get_instance
from vite_assets.jinja import TemplateVite, install_vite

TEMPLATE = "{{ vite.css() }}{{ vite.js() }}"


class TestInstallVite:
    def test_renders_production_tags(self, make_vite, write_manifest):
        """Test renders production tags"""
        write_manifest()
        env = install_vite(Environment(autoescape=True), make_vite())
        assert env.from_string(TEMPLATE).render() == (
            '<link href="/dist/assets/index.3fa1c2.css" rel="stylesheet">'
            '<script src="/dist/assets/index.9be0d1.js" type="module"></script>'
        )

    def test_none_renders_empty(self, make_vite):
        """Test none renders empty"""
        env = install_vite(Environment(autoescape=True), make_vite(environ={"KIRBY_MODE": "development"}))
        assert env.from_string("{{ vite.css() }}|{{ vite.preload_module('home') }}").render() == "|"

    def test_uses_process_wide_helper(self, make_host, write_manifest):
        """Test uses process wide helper"""
        write_manifest()
        helper = get_instance(make_host())
        env = install_vite(Environment(autoescape=True))
        assert isinstance(env.globals["vite"], TemplateVite)
        assert env.globals["vite"].out_dir == helper.out_dir
        assert "/dist/assets/index.9be0d1.js" in env.from_string("{{ vite.js() }}").render()

    def test_non_tag_helpers_pass_through(self, make_vite):
        """Test non tag helpers pass through"""
        env = install_vite(Environment(autoescape=False), make_vite())
        assert env.from_string("{{ vite.is_dev() }}").render() == "False"
        assert env.from_string("{{ vite.json({'a': 1}) }}").render() == '{"a":1}'

    def test_json_survives_autoescape(self, make_vite):
        """Test that page data embedded in a script block stays valid JSON under autoescape"""
        env = install_vite(Environment(autoescape=True), make_vite())
        data = {"title": "About", "url": "https://example.com/about", "html": "</script><b>&'"}
        rendered = env.from_string("<script>window.__DATA__ = {{ vite.json(data) }}</script>").render(data=data)

        payload = rendered[len("<script>window.__DATA__ = ") : -len("</script>")]
        assert json.loads(payload) == data
        assert "&#34;" not in payload
        assert "</script>" not in payload
        assert payload.startswith('{"title":"About","url":"https://example.com/about"')

    def test_preload_json_in_template(self, make_vite):
        """Test preload json in template"""
        env = install_vite(Environment(autoescape=True), make_vite(environ={"CONTENT_API_SLUG": "api"}))
        rendered = env.from_string("{{ vite.preload_json(page) }}").render(page="home")
        assert 'href="/api/home.json"' in rendered
        assert "&lt;" not in rendered
