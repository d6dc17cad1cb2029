# blog/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from blog.markdown.renderer import render_and_highlight

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_and_highlight(value))


@register.filter(name="markdown_safe")
def markdown_safe_filter(value):
    """Render markdown from an untrusted source (bleach sanitizing forced on)"""
    return mark_safe(render_and_highlight(value, context={"config": {"sanitize": True}}))


@register.simple_tag
def markdown_with_config(value, **config):
    """Template tag that passes config overrides, e.g. highlight=False"""
    return mark_safe(render_and_highlight(value, context={"config": config}))
