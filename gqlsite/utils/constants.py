from gqlsite.domain.models import NavItem

APP_NAME = "GraphQL Site"
SITE_NAME = "GraphQL"
DEFAULT_OUTPUT_DIR = "public"

NAV_ITEMS = (
    NavItem(section="learn", label="Learn", href="/learn/"),
    NavItem(section="code", label="Code", href="/code/"),
    NavItem(section="community", label="Community", href="/community/"),
    NavItem(section="blog", label="Blog", href="/blog/"),
    NavItem(section="spec", label="Spec", href="http://facebook.github.io/graphql/"),
)

CSS_SITE = """
:root { --bg:#ffffff; --fg:#202020; --muted:#555; --code:#f4f6f8; --border:#ddd; --link:#e10098; --nav:#171e26; }
html,body { background:var(--bg); color:var(--fg); margin:0; }
body { font-family: -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; line-height: 1.55; }
.site-header { background:var(--nav); padding:.75rem 1.25rem; }
.site-header .nav-home { color:#fff; font-weight:600; margin-right:1.5rem; }
.nav-main a { color:#c5cbd3; margin-right:1rem; }
.nav-main a.active { color:#fff; border-bottom:2px solid var(--link); }
.documentationContent { max-width: 860px; margin: 0 auto; padding: 1.25rem; }
h1,h2,h3,h4,h5 { margin-top: 1.2em; }
pre { padding:.75rem; overflow:auto; border-radius:8px; background:var(--code); }
code { background:var(--code); padding:.15rem .3rem; border-radius:6px; }
a { color:var(--link); text-decoration:none; } a:hover { text-decoration:underline; }
ul,ol { padding-left:1.5rem; }
.site-footer { border-top:1px solid var(--border); color:var(--muted); padding:1.25rem; text-align:center; }
"""

HTML_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1.0"/>
<title>{title}</title>
<style>{css}</style>
</head>
<body>
<header class="site-header">
<a class="nav-home" href="/">{site_name}</a>
<nav class="nav-main">{nav}</nav>
</header>
<section>
<div class="documentationContent">
<div class="inner-content">
<h1>{heading}</h1>
{body}
</div>
</div>
</section>
<footer class="site-footer">{footer}</footer>
</body>
</html>
"""

FOOTER_TEMPLATE = "Copyright © {year} The {site_name} Authors"
