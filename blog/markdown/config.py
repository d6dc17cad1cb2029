import logging

from django.conf import settings

from .exceptions import MarkdownConfigError

logger = logging.getLogger(__name__)

UNTERMINATED_FENCE_POLICIES = ("code", "literal")

DEFAULT_CONFIG = {
    # What to do with an opening ``` fence that never closes:
    #   "code"    - the rest of the document becomes the code block
    #   "literal" - leave the fence and everything after it as plain text
    "unterminated_fence": "code",
    # Run the bleach sanitizer over the rendered HTML. Off by default, so
    # inline code and link URLs pass through unescaped.
    "sanitize": False,
    # Highlight <pre><code class="language-*"> elements after rendering
    "highlight": True,
}


def _django_overrides():
    """Read BLOG_MARKDOWN from Django settings, if Django is set up."""
    if not settings.configured:
        return {}
    return dict(getattr(settings, "BLOG_MARKDOWN", {}) or {})


def get_markdown_config(overrides=None):
    """
    Configuration for the markdown renderer.

    Values are layered: module defaults, then ``settings.BLOG_MARKDOWN`` when
    running inside a configured Django project, then ``overrides`` (usually
    the ``"config"`` entry of a render context).

    Raises:
        MarkdownConfigError: for unknown keys or invalid values
    """
    config = dict(DEFAULT_CONFIG)
    config.update(_django_overrides())
    config.update(overrides or {})

    unknown = set(config) - set(DEFAULT_CONFIG)
    if unknown:
        raise MarkdownConfigError(
            f"Unknown markdown config keys: {', '.join(sorted(unknown))}"
        )

    if config["unterminated_fence"] not in UNTERMINATED_FENCE_POLICIES:
        raise MarkdownConfigError(
            f"unterminated_fence must be one of {UNTERMINATED_FENCE_POLICIES}, "
            f"got {config['unterminated_fence']!r}"
        )

    for key in ("sanitize", "highlight"):
        if not isinstance(config[key], bool):
            raise MarkdownConfigError(f"{key} must be a bool, got {config[key]!r}")

    logger.debug("Markdown config: %s", config)
    return config


def config_from_context(context):
    """Resolve (once per render) the config for a processor context."""
    config = context.get("markdown_config")
    if config is None:
        config = get_markdown_config(context.get("config"))
        context["markdown_config"] = config
    return config
