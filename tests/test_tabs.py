"""
Tab pane tests

Tests the tab controls and the tab-content block rendered for items that
carry a TabPane.
"""

from bootnav.lib.composer import ListComposer
from bootnav.models import Item, ItemCollection, TabPane


def profile_tabs():
    return ItemCollection.of(
        Item.link("Home", pane=TabPane("Home body")),
        Item.link("Profile", pane=TabPane("Profile body", fade=True)),
    ).tabs()


class TestTabControls:
    """Test the nav part of a tabbed interface"""

    def test_container_role(self):
        """The list is a tablist"""
        html = ListComposer().render(profile_tabs())
        assert html.startswith('<ul class="nav nav-tabs" role="tablist">\n')

    def test_first_tab_active_by_default(self):
        """With nothing active the first tab is selected"""
        html = ListComposer().render(profile_tabs())
        assert (
            '<li class="nav-item" role="presentation">'
            '<button id="w0-tab" class="nav-link active" type="button" data-bs-toggle="tab" '
            'data-bs-target="#w0-pane" role="tab" aria-controls="w0-pane" aria-selected="true" '
            'aria-current="page">Home</button></li>'
        ) in html
        assert 'aria-controls="w1-pane" aria-selected="false">Profile</button>' in html

    def test_matcher_selects_tab(self):
        """An explicit matcher picks the selected tab"""
        html = ListComposer().render(profile_tabs().with_activeMatcher(1))
        assert 'aria-controls="w0-pane" aria-selected="false">Home</button>' in html
        assert 'id="w1-tab" class="nav-link active"' in html

    def test_disabled_first_tab_skipped(self):
        """The default selection skips disabled tabs"""
        collection = ItemCollection.of(
            Item.link("Home", disabled=True, pane=TabPane("a")),
            Item.link("Profile", pane=TabPane("b")),
        )
        state = ListComposer().activeState_resolve(collection)
        assert state.flags == (False, True)

    def test_pills_toggle(self):
        """Pill navs toggle panes as pills"""
        html = ListComposer().render(profile_tabs().pills())
        assert html.count('data-bs-toggle="pill"') == 2

    def test_caller_ids_kept(self):
        """Ids given by the caller replace the generated ones"""
        collection = ItemCollection.of(
            Item.link("Home", link_attributes={"id": "home-tab"},
                      pane=TabPane("Home body", attributes={"id": "home"})),
        )
        html = ListComposer().render(collection)
        assert 'id="home-tab"' in html
        assert 'data-bs-target="#home"' in html
        assert '<div id="home" class="tab-pane active" role="tabpanel" aria-labelledby="home-tab" tabindex="0">' in html


class TestTabContent:
    """Test the tab-content block"""

    def test_panes_follow_nav(self):
        """Panes come after the nav in a tab-content div"""
        html = ListComposer().render(profile_tabs())
        nav, content = html.split("</ul>\n")
        assert content == (
            '<div class="tab-content">\n'
            '<div id="w0-pane" class="tab-pane active" role="tabpanel" aria-labelledby="w0-tab" tabindex="0">Home body</div>\n'
            '<div id="w1-pane" class="tab-pane fade" role="tabpanel" aria-labelledby="w1-tab" tabindex="0">Profile body</div>\n'
            "</div>"
        )

    def test_fade_active_pane_shows(self):
        """An active fading pane gets show"""
        html = ListComposer().render(profile_tabs().with_activeMatcher(1))
        assert 'class="tab-pane fade active show"' in html

    def test_pane_encoding(self):
        """Pane content is markup unless encode is set"""
        collection = ItemCollection.of(
            Item.link("A", pane=TabPane("<p>raw</p>")),
            Item.link("B", pane=TabPane("<p>safe</p>", encode=True)),
        )
        html = ListComposer().render(collection)
        assert "<p>raw</p>" in html
        assert "&lt;p&gt;safe&lt;/p&gt;" in html

    def test_tab_content_attributes(self):
        """Extra attributes land on the tab-content block"""
        collection = profile_tabs().with_tabContentAttributes({"class": "p-3", "id": "content"})
        assert '<div class="tab-content p-3" id="content">' in ListComposer().render(collection)

    def test_no_panes_no_content(self):
        """Collections without panes have no tab-content block"""
        html = ListComposer().render(ItemCollection.of(Item.link("A", "/a")).tabs())
        assert "tab-content" not in html
        assert "tablist" not in html


class TestSeparateTabContent:
    """Test placing the tab-content block away from the nav"""

    def test_content_turned_off(self):
        """render_content=False leaves only the tab controls"""
        html = ListComposer().render(profile_tabs().with_renderContent(False))
        assert html.endswith("</ul>")
        assert "tab-content" not in html
        assert 'data-bs-target="#w0-pane"' in html

    def test_content_rendered_alone(self):
        """tabContent_render returns the block render() would have appended"""
        tabs = profile_tabs()
        full = ListComposer().render(tabs)
        nav = ListComposer().render(tabs.with_renderContent(False))
        content = ListComposer().tabContent_render(tabs)

        assert content.startswith('<div class="tab-content">\n')
        assert full == nav + "\n" + content

    def test_content_follows_matcher(self):
        """The selected pane is resolved the same way as the tab"""
        content = ListComposer().tabContent_render(profile_tabs().with_activeMatcher(1))
        assert '<div id="w0-pane" class="tab-pane" role="tabpanel"' in content
        assert '<div id="w1-pane" class="tab-pane fade active show" role="tabpanel"' in content

    def test_content_ids_follow_container_id(self):
        """Pane ids match the nav when the container also draws an id"""
        tabs = profile_tabs().with_autoId()
        nav = ListComposer().render(tabs.with_renderContent(False))
        content = ListComposer().tabContent_render(tabs)

        assert nav.startswith('<ul id="w0" class="nav nav-tabs" role="tablist">')
        assert 'aria-controls="w1-pane"' in nav
        assert '<div id="w1-pane" class="tab-pane active" role="tabpanel" aria-labelledby="w1-tab"' in content

    def test_no_panes(self):
        """Collections without panes have no tab content"""
        assert ListComposer().tabContent_render(ItemCollection.of(Item.link("A", "/a"))) == ""
