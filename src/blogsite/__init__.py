"""blogsite - tooling for the dirkhierold.de blog.

Hero image generation, site constants and the markdown mirror page.
"""

__version__ = "0.1.0"
