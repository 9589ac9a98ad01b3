"""Render a release into its changelog text."""

import jinja2

from sumit.models import Release

RELEASE_TEMPLATE = """
## [{{ release.version }}] - {{ release.date }}
{% for change in release.changes %}
- {{ change.title }} {% if change.url %}[{{ change.sha }}]({{ change.url }}){% else %}[{{ change.sha }}]{% endif %}{% endfor %}
"""

# Titles are emitted verbatim, so autoescaping stays off.
_env = jinja2.Environment(
    autoescape=False,
    keep_trailing_newline=True,
    undefined=jinja2.StrictUndefined,
)
_template = _env.from_string(RELEASE_TEMPLATE)


def render_release(release: Release) -> str:
    """Render the changelog entry for a release."""
    return _template.render(release=release)
