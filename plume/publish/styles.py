"""Stylesheets embedded in HTML and EPUB exports."""

HTML_STYLESHEET = """
:root { font-family: system-ui, -apple-system, sans-serif; line-height: 1.6; color: #333; }
body { max-width: 800px; margin: 0 auto; padding: 2rem; }
.title-page { text-align: center; margin: 20vh 0; }
.title-page h1 { font-size: 3rem; margin-bottom: 0.5rem; }
.title-page h2 { font-size: 1.5rem; font-weight: normal; color: #666; }
.toc-page { page-break-after: always; margin-bottom: 4rem; }
.chapter-section { margin-top: 4rem; page-break-before: always; }
.chapter-section h1 { text-align: center; margin-bottom: 2rem; font-size: 2rem; border-bottom: 1px solid #eee; padding-bottom: 1rem; }
.chapter-divider { border: 0; border-top: 2px dashed #ccc; margin: 4rem 0; }
blockquote { border-left: 4px solid #ddd; padding-left: 1rem; color: #555; font-style: italic; }
img { max-width: 100%; height: auto; }
pre { background: #f4f4f4; padding: 1rem; overflow-x: auto; border-radius: 4px; }
code { font-family: monospace; background: #f4f4f4; padding: 0.2rem 0.4rem; border-radius: 3px; }
"""

EPUB_STYLESHEET = """
body { font-family: serif; line-height: 1.6; margin: 5%; text-align: justify; }
h1, h2, h3 { font-family: sans-serif; color: #333; }
h1 { text-align: center; margin-bottom: 2em; page-break-before: always; }
h4.separator { text-align: center; margin: 2em 0; border-top: 1px solid #ccc; padding-top: 1em; }
blockquote { border-left: 2px solid #666; padding-left: 1em; margin-left: 0; font-style: italic; }
img { max-width: 100%; height: auto; }
.title-page { text-align: center; margin-top: 20vh; }
.title-page h2 { font-size: 1.5em; font-weight: normal; }
"""
