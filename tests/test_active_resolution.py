"""
Active resolution tests

Tests explicit flags, index and URL matchers, parent activation and the
inheritance of matchers into nested dropdowns.
"""

from bootnav.lib.composer import ListComposer, url_matches
from bootnav.models import Item, ItemCollection


def flags(collection):
    return ListComposer().activeState_resolve(collection).flags


class TestUrlMatching:
    """Test the URL comparison rule"""

    def test_query_stripped_on_item(self):
        """The item's query string is ignored"""
        assert url_matches("/link-2?foo=bar", "/link-2")

    def test_matcher_query_kept(self):
        """A matcher with a query string only matches that exact URL"""
        assert not url_matches("/orders", "/orders?status=open")
        assert not url_matches("/orders?status=closed", "/orders?status=open")

    def test_full_url_equality(self):
        """An exact match including the query string matches"""
        assert url_matches("/orders?status=open", "/orders?status=open")

    def test_different_path(self):
        """Different paths do not match, prefixes included"""
        assert not url_matches("/orders/open", "/orders")
        assert not url_matches(None, "/orders")


class TestMatchers:
    """Test index and URL matchers"""

    def test_string_matcher(self):
        """The matching item is active and the others are not"""
        collection = ItemCollection.of(
            Item.link("Link 1", "/link-1"),
            Item.link("Link 2", "/link-2?foo=bar"),
            Item.link("Link 3", "/link-3"),
        ).with_activeMatcher("/link-2")
        assert flags(collection) == (False, True, False)

        html = ListComposer().render(collection)
        assert html.count('class="nav-link active"') == 1
        assert html.count('aria-current="page"') == 1
        assert '<a class="nav-link active" href="/link-2?foo=bar" aria-current="page">' in html

    def test_first_match_wins(self):
        """Only the first matching item is activated"""
        collection = ItemCollection.of(
            Item.link("A", "/same"),
            Item.link("B", "/same?x=1"),
        ).with_activeMatcher("/same")
        assert flags(collection) == (True, False)

    def test_query_matcher_picks_exact_item(self):
        """Items sharing a path are told apart by the matcher's query"""
        collection = ItemCollection.of(
            Item.link("A", "/a?x=1"),
            Item.link("B", "/a?x=2"),
        ).with_activeMatcher("/a?x=2")
        assert flags(collection) == (False, True)

        html = ListComposer().render(collection)
        assert '<a class="nav-link" href="/a?x=1">A</a>' in html
        assert '<a class="nav-link active" href="/a?x=2" aria-current="page">B</a>' in html

    def test_index_matcher(self):
        """Index 2 activates the third item whatever its URL"""
        collection = ItemCollection.of(
            Item.link("A", "/a"),
            Item.link("B", "/b"),
            Item.link("C"),
        ).with_activeMatcher(2)
        assert flags(collection) == (False, False, True)

    def test_index_counts_invisible_items(self):
        """The index is taken before invisible items are filtered"""
        collection = ItemCollection.of(
            Item.link("A", "/a"),
            Item.link("B", "/b", visible=False),
            Item.link("C", "/c"),
        ).with_activeMatcher(1)
        assert flags(collection) == (False, False, False)
        assert flags(collection.with_activeMatcher(2)) == (False, False, True)

    def test_no_match(self):
        """A matcher that matches nothing leaves everything inactive"""
        collection = ItemCollection.of(Item.link("A", "/a")).with_activeMatcher("/zzz")
        assert flags(collection) == (False,)
        assert "active" not in ListComposer().render(collection)

    def test_out_of_range_index(self):
        """An index past the end matches nothing"""
        collection = ItemCollection.of(Item.link("A", "/a")).with_activeMatcher(5)
        assert flags(collection) == (False,)

    def test_disabled_never_matched(self):
        """Disabled items are skipped by the matcher"""
        collection = ItemCollection.of(
            Item.link("A", "/a", disabled=True),
            Item.link("B", "/b"),
        )
        assert flags(collection.with_activeMatcher("/a")) == (False, False)
        assert flags(collection.with_activeMatcher(0)) == (False, False)

    def test_explicit_and_matched_both_active(self):
        """An explicit flag does not stop the matcher"""
        collection = ItemCollection.of(
            Item.link("A", "/a", active=True),
            Item.link("B", "/b"),
        ).with_activeMatcher("/b")
        assert flags(collection) == (True, True)


class TestParentActivation:
    """Test activate_parents"""

    def nav(self):
        return ItemCollection.of(
            Item.link("Home", "/"),
            Item.link(
                "Orders",
                dropdown=ItemCollection.of(
                    Item.link("Open", "/orders/open"),
                    Item.link("Closed", "/orders/closed"),
                ),
            ),
            Item.link(
                "Reports",
                dropdown=ItemCollection.of(Item.link("Sales", "/reports/sales")),
            ),
        ).with_activeMatcher("/orders/open")

    def test_matcher_inherited_by_dropdown(self):
        """Nested collections use the parent's URL matcher"""
        state = ListComposer().activeState_resolve(self.nav())
        assert state.children[1].flags == (True, False)
        assert state.children[2].flags == (False,)

    def test_parents_not_activated_by_default(self):
        """Without activate_parents the toggle stays inactive"""
        assert flags(self.nav()) == (False, False, False)

    def test_parent_activated(self):
        """The owning toggle is active; sibling toggles are not"""
        collection = self.nav().with_activateParents()
        assert flags(collection) == (False, True, False)

        html = ListComposer().render(collection)
        assert 'class="nav-link active dropdown-toggle"' in html
        assert '<a class="dropdown-item active" href="/orders/open" aria-current="page">Open</a>' in html
        assert html.count("active") == 2

    def test_explicit_descendant_activates_parent(self):
        """An explicitly active child also activates its parent"""
        collection = ItemCollection.of(
            Item.link("Menu", dropdown=ItemCollection.of(Item.link("Child", "/c", active=True))),
        ).with_activateParents()
        assert flags(collection) == (True,)

    def test_cascade_through_levels(self):
        """Activation propagates through every nesting level"""
        collection = ItemCollection.of(
            Item.link(
                "Level 1",
                dropdown=ItemCollection.of(
                    Item.link(
                        "Level 2",
                        dropdown=ItemCollection.of(
                            Item.link("Level 3", dropdown=ItemCollection.of(Item.link("Leaf", "/leaf"))),
                        ),
                    ),
                ),
            ),
        ).with_activeMatcher("/leaf").with_activateParents()
        state = ListComposer().activeState_resolve(collection)

        assert state.flags == (True,)
        assert state.children[0].flags == (True,)
        assert state.children[0].children[0].flags == (True,)
        assert state.children[0].children[0].children[0].flags == (True,)

    def test_disabled_parent_not_activated(self):
        """Disabled toggles are never activated by a descendant"""
        collection = ItemCollection.of(
            Item.link("Menu", disabled=True, dropdown=ItemCollection.of(Item.link("Child", "/c"))),
        ).with_activeMatcher("/c").with_activateParents()
        assert flags(collection) == (False,)

    def test_invisible_child_does_not_activate(self):
        """Invisible descendants are never matched"""
        collection = ItemCollection.of(
            Item.link("Menu", dropdown=ItemCollection.of(
                Item.link("Hidden", "/c", visible=False),
                Item.link("Shown", "/d"),
            )),
        ).with_activeMatcher("/c").with_activateParents()
        assert flags(collection) == (False,)

    def test_index_matcher_not_inherited(self):
        """An index only applies to the collection that sets it"""
        collection = ItemCollection.of(
            Item.link("Menu", dropdown=ItemCollection.of(Item.link("Child", "/c"))),
        ).with_activeMatcher(0)
        state = ListComposer().activeState_resolve(collection)
        assert state.flags == (True,)
        assert state.children[0].flags == (False,)

    def test_nested_matcher_overrides(self):
        """A nested collection's own matcher wins over the inherited one"""
        collection = ItemCollection.of(
            Item.link("Menu", dropdown=ItemCollection.of(
                Item.link("A", "/a"),
                Item.link("B", "/b"),
            ).with_activeMatcher(1)),
        ).with_activeMatcher("/a").with_activateParents()
        state = ListComposer().activeState_resolve(collection)
        assert state.children[0].flags == (False, True)
        assert state.flags == (True,)
