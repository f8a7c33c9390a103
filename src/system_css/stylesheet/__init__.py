from system_css.stylesheet.model import Declaration, MediaBlock, Rule, Stylesheet
from system_css.stylesheet.serializer import render

__all__ = ["Declaration", "MediaBlock", "Rule", "Stylesheet", "render"]
