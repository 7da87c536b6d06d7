"""
Unit tests for shallow and deep population.

Covers which members are assigned, how collections are extended, member
factory precedence, and how population failures are reported.
"""

import pytest

from anonymous_data import AnonymousDataError, Member, PopulateOption
from tests.fixtures.models import (
    Address,
    Archive,
    Bag,
    Basket,
    Book,
    Branch,
    Catalog,
    Color,
    Coordinates,
    Customer,
    Fragile,
    Library,
    Profile,
    Shelf,
    Tag,
    Thermostat,
    Tree,
)


class TestPopulateOptions:
    """Test cases for the three population levels."""

    def test_none_leaves_members_unset(self, data):
        """Test an unpopulated instance only has what its constructor set."""
        tree = data.any(Tree)

        assert not hasattr(tree, "left")
        assert not hasattr(tree, "right")

    def test_shallow_assigns_own_members_only(self, data):
        """Test shallow population stops at the instance's own members."""
        tree = data.any(Tree, PopulateOption.SHALLOW)

        assert isinstance(tree.left, Branch)
        assert isinstance(tree.right, Branch)
        assert not hasattr(tree.left, "name")
        assert not hasattr(tree.left, "tag")

    def test_deep_populates_whole_graph(self, data):
        """Test deep population reaches every object it creates."""
        tree = data.any(Tree, PopulateOption.DEEP)

        for branch in (tree.left, tree.right):
            assert isinstance(branch.name, str)
            assert isinstance(branch.tag, Tag)
            assert isinstance(branch.tag.label, str)

    def test_scalar_members_are_skipped(self, data):
        """Test bool, int, float and complex members are never assigned."""
        tree = data.any(Tree, PopulateOption.DEEP)

        assert not hasattr(tree, "height")

    def test_populate_deep_flag(self, data):
        """Test populate(deep=True) is equivalent to PopulateOption.DEEP."""
        tree = data.populate(Tree(), deep=True)

        assert isinstance(tree.left.tag.label, str)

    def test_populate_default_is_shallow(self, data):
        """Test populate() without flags populates one level."""
        tree = data.populate(Tree())

        assert isinstance(tree.left, Branch)
        assert not hasattr(tree.left, "tag")

    def test_populate_returns_same_instance(self, data):
        """Test the populated instance is the one passed in."""
        tree = Tree()

        assert data.populate(tree) is tree

    def test_populate_with_option(self, data):
        """Test populate_with() accepts an explicit option."""
        tree = Tree()

        assert data.populate_with(tree, PopulateOption.NONE) is tree
        assert not hasattr(tree, "left")

    def test_populate_none_is_noop(self, data):
        """Test populating None returns None."""
        assert data.populate(None) is None


class TestMemberSelection:
    """Test cases for which members are considered."""

    def test_private_and_class_variables_ignored(self, data):
        """Test underscore-prefixed members and ClassVars are left alone."""
        profile = data.populate(Profile())

        assert not hasattr(profile, "_secret")
        assert Profile.category == "profile"
        assert profile.category == "profile"
        assert profile.color in list(Color)

    def test_writable_properties_assigned(self, data):
        """Test properties with setters are assigned through the setter."""
        thermostat = data.populate(Thermostat())

        assert thermostat.label != ""
        assert isinstance(thermostat.location, Address)

    def test_read_only_property_skipped(self, data):
        """Test a property without a setter is not assigned."""
        thermostat = data.populate(Thermostat())

        assert thermostat.reading == Coordinates(0.0, 0.0)

    def test_frozen_dataclass_untouched(self, data):
        """Test frozen dataclass fields are not writable."""
        coordinates = Coordinates(1.0, 2.0)

        data.populate(coordinates)

        assert coordinates == Coordinates(1.0, 2.0)

    def test_constructor_values_overwritten(self, data):
        """Test populating replaces values the constructor chose."""
        customer = Customer("fixed", Address("s", "c", "p"), Color.RED)
        original_address = customer.address

        data.populate(customer)

        assert customer.name != "fixed"
        assert customer.address is not original_address


class TestCollectionMembers:
    """Test cases for members holding collections."""

    def test_existing_list_extended_in_place(self, data):
        """Test an existing list is appended to rather than replaced."""
        books: list[Book] = []
        shelf = Shelf(books)

        data.populate(shelf)

        assert shelf.books is books
        assert 1 <= len(books) <= 5
        assert all(isinstance(book, Book) for book in books)

    def test_existing_items_kept(self, data):
        """Test items already in the collection stay in place."""
        first = Book()
        shelf = Shelf([first])

        data.populate(shelf)

        assert shelf.books[0] is first
        assert len(shelf.books) >= 2

    def test_unset_collection_assigned(self, data):
        """Test a writable collection member that is unset gets a new collection."""
        library = data.populate(Library())

        assert isinstance(library.books, list)
        assert all(isinstance(book, Book) for book in library.books)

    def test_deep_population_reaches_collection_items(self, data):
        """Test items added to a collection are populated in deep mode."""
        shelf = data.populate(Shelf(), deep=True)
        library = data.populate(Library(), deep=True)

        assert all(isinstance(book.title, str) for book in shelf.books)
        assert all(isinstance(book.title, str) for book in library.books)

    def test_existing_optional_list_extended_in_place(self, data):
        """Test a nullable list member that holds a list is appended to."""
        archive = Archive()
        books: list[Book] = []
        archive.books = books

        data.populate(archive)

        assert archive.books is books
        assert 1 <= len(books) <= 5
        assert all(isinstance(book, Book) for book in books)

    def test_unset_optional_list_items_populated_in_deep_mode(self, data):
        """Test items of a new nullable collection are populated in deep mode."""
        archive = data.populate(Archive(), deep=True)

        assert isinstance(archive.books, list)
        assert all(isinstance(book.title, str) for book in archive.books)
        assert all(isinstance(shelf, Shelf) for shelf in archive.shelves)

    def test_mapping_values_populated_in_deep_mode(self, data):
        """Test the values of a new mapping member are populated, not just its keys."""
        catalog = data.populate(Catalog(), deep=True)

        assert catalog.by_title
        assert all(isinstance(book.title, str) for book in catalog.by_title.values())

    def test_iterator_items_populated_in_deep_mode(self, data):
        """Test an iterator member still yields every item after deep population."""
        catalog = data.populate(Catalog(), deep=True)

        books = list(catalog.stream)
        assert 1 <= len(books) <= 5
        assert all(isinstance(book.title, str) for book in books)

    def test_shallow_population_skips_collection_items(self, data):
        """Test items are not populated in shallow mode."""
        shelf = data.populate(Shelf())

        assert all(not hasattr(book, "title") for book in shelf.books)

    def test_custom_collection_uses_its_add_method(self, data):
        """Test a custom collection is extended through its own add()."""
        basket = Basket()
        bag = basket.contents

        data.populate(basket)

        assert basket.contents is bag
        assert len(bag) >= 1
        assert all(isinstance(item, int) for item in bag)

    def test_dataclass_list_field(self, data):
        """Test a dataclass list field built by the constructor is extended."""
        customer = data.any(Customer)
        built = len(customer.tags)

        data.populate(customer)

        assert len(customer.tags) > built


class TestMemberFactories:
    """Test cases for member-level factories during population."""

    def test_member_factory_wins_over_type_factory(self, data):
        """Test the member registration is used for that member only."""
        data.register_member(Profile, "nickname", lambda d: "nick")

        profile = data.populate(Profile())

        assert profile.nickname == "nick"
        assert profile.email != "nick"

    def test_member_factory_result_populated_in_deep_mode(self, data):
        """Test values from member factories are enqueued like any other."""
        data.register_member(Tree, "left", lambda d: Branch())

        tree = data.populate(Tree(), deep=True)

        assert isinstance(tree.left.name, str)


class TestPopulationErrors:
    """Test cases for failures while assigning members."""

    def test_failing_setter_names_member(self, data):
        """Test the error identifies the member and carries the cause."""
        with pytest.raises(AnonymousDataError) as exc_info:
            data.populate(Fragile())

        assert exc_info.value.target == Member(Fragile, "part")
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert "Fragile.part" in str(exc_info.value)

    def test_failing_member_factory_names_member(self, data):
        """Test a failing member factory is reported against its member."""

        def factory(source):
            raise LookupError("no nickname")

        data.register_member(Profile, "nickname", factory)

        with pytest.raises(AnonymousDataError) as exc_info:
            data.populate(Profile())

        assert exc_info.value.target == Member(Profile, "nickname")
        assert isinstance(exc_info.value.cause, LookupError)

    def test_population_failure_during_any_is_wrapped(self, data):
        """Test a member failure inside any() is wrapped with the requested type."""
        with pytest.raises(AnonymousDataError) as exc_info:
            data.any(Fragile, PopulateOption.SHALLOW)

        assert exc_info.value.target is Fragile
        inner = exc_info.value.__cause__
        assert isinstance(inner, AnonymousDataError)
        assert inner.target == Member(Fragile, "part")

    def test_bag_without_population(self, data):
        """Test containers expose no members of their own."""
        bag = Bag()

        data.populate(bag)

        assert len(bag) == 0
