from typing import Any, Dict, Optional

from markupsafe import Markup, escape

Attributes = Dict[str, Any]


class HtmlTagService:
    def script_tag(self, url: str, attributes: Optional[Attributes] = None) -> Markup:
        attrs = {"src": url, **(attributes or {})}
        return Markup(f"<script{self.render_attributes(attrs)}></script>")

    def style_tag(self, url: str, attributes: Optional[Attributes] = None) -> Markup:
        attrs = {"rel": "stylesheet", "href": url, **(attributes or {})}
        return Markup(f"<link{self.render_attributes(attrs)}>")

    @staticmethod
    def render_attributes(attributes: Attributes) -> str:
        """
        ``True`` renders a bare attribute (``nomodule``), ``False`` and
        ``None`` leave the attribute out.
        """
        rendered = []
        for name, value in attributes.items():
            if value is None or value is False:
                continue
            if value is True:
                rendered.append(f" {escape(name)}")
            else:
                rendered.append(f' {escape(name)}="{escape(value)}"')
        return "".join(rendered)
