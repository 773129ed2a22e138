"""
Templates package - PyDOM components for the demo page.
"""

from pydom_datastar.templates.demo import DemoPage, render_demo_page

__all__ = ["DemoPage", "render_demo_page"]
