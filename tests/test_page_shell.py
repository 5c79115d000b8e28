import pytest

from gqlsite.domain.models import NavItem, Page
from gqlsite.services.page_shell import PageShell


@pytest.fixture
def page() -> Page:
    return Page(section="code", title="Code", markdown="", permalink="/code/")


def test_shell_wraps_body_in_full_document(shell: PageShell, page: Page):
    html = shell.render(page, "<p>content</p>")
    assert html.lower().startswith("<!doctype html")
    assert "<title>Code | GraphQL</title>" in html
    assert "<h1>Code</h1>" in html
    assert '<div class="inner-content">' in html
    assert "<p>content</p>" in html
    assert "<style>" in html


def test_shell_marks_only_current_section_active(shell: PageShell, page: Page):
    html = shell.render(page, "")
    assert '<a href="/code/" class="active">Code</a>' in html
    assert html.count('class="active"') == 1
    assert '<a href="/learn/">Learn</a>' in html


def test_shell_footer_uses_year_and_site_name(page: Page):
    html = PageShell(site_name="Example", year=2016).render(page, "")
    assert "2016 The Example Authors" in html
    assert "<title>Code | Example</title>" in html


def test_shell_escapes_title():
    html = PageShell(year=2016).render(Page(section="x", title="A & <B>", markdown=""), "")
    assert "<h1>A &amp; &lt;B&gt;</h1>" in html


def test_shell_custom_nav(page: Page):
    nav = [NavItem(section="code", label="Libraries", href="/code/")]
    html = PageShell(nav=nav, year=2016).render(page, "")
    assert '<a href="/code/" class="active">Libraries</a>' in html
    assert "/learn/" not in html


def test_shell_rejects_page_without_section(shell: PageShell):
    with pytest.raises(ValueError):
        shell.render(Page(section="", title="Orphan", markdown=""), "")
