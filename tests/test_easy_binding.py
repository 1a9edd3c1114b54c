"""Module: test_easy_binding.py

Date: 2026-10-19

Tests for EasyBinding: construction, initial sync, bidirectional propagation,
broken chains, converters and unbind.
"""

import pytest

from easybind.core.easy_binding import EasyBinding
from easybind.core.value_converter import FunctionConverter
from easybind.errors import (
    BindingStateError,
    FieldNotFoundError,
    InvalidKeyPathError,
    NotWritableError,
)
from easybind.properties import Property
from tests.mocks import CountingProperty, House, Owner, make_person


class Form:
    def __init__(self, title="Untitled"):
        self.title = CountingProperty(title, "form.title")
        self.count = CountingProperty(0, "form.count")


@pytest.fixture
def form_root():
    return Property(Form(), "form")


def form_title(form_root):
    return form_root.get_value().title


def house_name(person_root):
    return person_root.get_value().house.get_value().name


class TestConstruction:
    """Test EasyBinding construction and accessors."""

    def test_accessors(self, form_root, person_root):
        binding = EasyBinding(form_root, "root.title", person_root, "root.house.name")

        assert binding.destination_object is form_root
        assert binding.destination_key_path == "root.title"
        assert binding.source_object is person_root
        assert binding.source_key_path == "root.house.name"
        assert not binding.is_bound
        assert not binding.is_inert

    def test_construction_attaches_nothing(self, form_root, person_root):
        EasyBinding(form_root, "root.title", person_root, "root.house.name")
        assert form_root.listener_count() == 0
        assert person_root.listener_count() == 0

    def test_bad_destination_path(self, form_root, person_root):
        with pytest.raises(InvalidKeyPathError, match="destination"):
            EasyBinding(form_root, "title", person_root, "root.house.name")
        assert form_root.listener_count() == 0

    def test_bad_source_path(self, form_root, person_root):
        with pytest.raises(InvalidKeyPathError, match="source"):
            EasyBinding(form_root, "root.title", person_root, "house.name")


class TestBind:
    """Test bind() and the initial synchronization pass."""

    def test_destination_value_wins_on_bind(self, form_root, person_root):
        binding = EasyBinding(form_root, "root.title", person_root, "root.house.name")
        binding.bind()

        assert binding.is_bound
        assert house_name(person_root).get_value() == "Untitled"
        assert form_title(form_root).get_value() == "Untitled"

    def test_bind_installs_listeners_on_both_sides(self, form_root, person_root):
        binding = EasyBinding(form_root, "root.title", person_root, "root.house.name")
        binding.bind()

        assert binding.destination_engine.hop_count == 2
        assert binding.source_engine.hop_count == 3

    def test_bind_twice_raises(self, form_root, person_root):
        binding = EasyBinding(form_root, "root.title", person_root, "root.house.name")
        binding.bind()
        with pytest.raises(BindingStateError):
            binding.bind()

    def test_read_only_terminal_fails_at_bind(self, form_root, person_root):
        binding = EasyBinding(form_root, "root.title", person_root, "root.house.sign")

        with pytest.raises(NotWritableError):
            binding.bind()

        assert not binding.is_bound
        assert form_root.listener_count() == 0
        assert person_root.listener_count() == 0

    def test_bad_field_fails_at_bind_without_leaks(self, form_root, person_root):
        binding = EasyBinding(form_root, "root.title", person_root, "root.house.garden")

        with pytest.raises(FieldNotFoundError):
            binding.bind()

        assert form_root.listener_count() == 0
        assert person_root.listener_count() == 0

    def test_broken_destination_nulls_source_on_bind(self, person_root):
        empty = Property(None, "empty")
        binding = EasyBinding(empty, "root.title", person_root, "root.house.name")
        binding.bind()

        assert house_name(person_root).get_value() is None

    def test_read_only_terminal_reached_after_bind_raises_on_write(self, form_root):
        empty = Property(None, "empty")
        binding = EasyBinding(form_root, "root.title", empty, "root.sign")
        binding.bind()

        with pytest.raises(NotWritableError, match="root.sign"):
            empty.set_value(House("Villa"))

        assert binding.is_bound


class TestSynchronization:
    """Test propagation of changes between the two sides."""

    def test_source_change_reaches_destination(self, form_root, person_root):
        EasyBinding(form_root, "root.title", person_root, "root.house.name").bind()

        house_name(person_root).set_value("Castle")

        assert form_title(form_root).get_value() == "Castle"

    def test_destination_change_reaches_source(self, form_root, person_root):
        EasyBinding(form_root, "root.title", person_root, "root.house.name").bind()

        form_title(form_root).set_value("Cottage")

        assert house_name(person_root).get_value() == "Cottage"

    def test_no_write_back_to_originating_side(self, form_root, person_root):
        EasyBinding(form_root, "root.title", person_root, "root.house.name").bind()
        title = form_title(form_root)
        name = house_name(person_root)
        title_writes = title.write_count
        name_writes = name.write_count

        new_value = "Z"
        title.set_value(new_value)

        assert name.get_value() is new_value
        assert name.write_count == name_writes + 1
        # only the write made by the test itself
        assert title.write_count == title_writes + 1

    def test_equal_value_is_not_rewritten(self, form_root, person_root):
        EasyBinding(form_root, "root.title", person_root, "root.house.name").bind()
        name = house_name(person_root)
        writes = name.write_count

        form_title(form_root).set_value(name.get_value())

        assert name.write_count == writes

    def test_intermediate_replacement_syncs_new_value(self, form_root, person_root):
        EasyBinding(form_root, "root.title", person_root, "root.house.name").bind()

        person_root.get_value().house.set_value(House("Evy's Ranch"))

        assert form_title(form_root).get_value() == "Evy's Ranch"

    def test_intermediate_nulling_nulls_other_side(self, form_root, person_root):
        EasyBinding(form_root, "root.title", person_root, "root.house.name").bind()

        person_root.get_value().house.set_value(None)

        assert form_title(form_root).get_value() is None

    def test_write_skipped_while_other_side_broken(self, form_root):
        owned = make_person("Villa", owner_name="Evy")
        EasyBinding(form_root, "root.title", owned, "root.house.owner.name").bind()
        house = owned.get_value().house.get_value()
        house.owner.set_value(None)
        assert form_title(form_root).get_value() is None

        form_title(form_root).set_value("Lost")

        # nothing queued: the re-resolved chain shows the new owner's own value
        new_owner = Owner("Ada")
        house.owner.set_value(new_owner)
        assert new_owner.name.get_value() == "Ada"
        assert form_title(form_root).get_value() == "Ada"

    def test_both_sides_on_same_graph(self, owned_root):
        EasyBinding(owned_root, "root.house.name", owned_root, "root.house.owner.name").bind()
        house = owned_root.get_value().house.get_value()
        owner = house.owner.get_value()
        assert owner.name.get_value() == "Villa"

        owner.name.set_value("Ada's")

        assert house.name.get_value() == "Ada's"


class TestConverter:
    """Test the optional value converter."""

    def test_converter_applied_in_both_directions(self, form_root):
        counter = Property(Form(), "counter")
        binding = EasyBinding(
            counter, "root.count", form_root, "root.title", converter=FunctionConverter(str, int)
        )
        binding.bind()
        title = form_title(form_root)
        count = counter.get_value().count

        assert title.get_value() == "0"

        count.set_value(7)
        assert title.get_value() == "7"

        title.set_value("12")
        assert count.get_value() == 12

    def test_converter_does_not_ping_pong(self, form_root):
        counter = Property(Form(), "counter")
        EasyBinding(
            counter, "root.count", form_root, "root.title", converter=FunctionConverter(str, int)
        ).bind()
        title = form_title(form_root)
        writes = title.write_count

        counter.get_value().count.set_value(1000)

        assert title.get_value() == "1000"
        assert title.write_count == writes + 1

    def test_none_is_not_converted(self, form_root):
        counter = Property(Form(), "counter")
        EasyBinding(
            counter, "root.count", form_root, "root.title", converter=FunctionConverter(str, int)
        ).bind()

        form_root.set_value(None)

        assert counter.get_value().count.get_value() is None

    def test_equal_converted_value_is_not_written_back_on_bind(self, form_root):
        counter = Property(Form(), "counter")
        count = counter.get_value().count
        count.set_value(1000)
        writes = count.write_count

        EasyBinding(
            counter, "root.count", form_root, "root.title", converter=FunctionConverter(str, int)
        ).bind()

        assert form_title(form_root).get_value() == "1000"
        assert count.get_value() == 1000
        assert count.write_count == writes

    def test_converter_error_during_bind_releases_listeners(self, form_root):
        def fail(value):
            raise ValueError(f"cannot convert {value!r}")

        counter = Property(Form(), "counter")
        binding = EasyBinding(
            counter, "root.count", form_root, "root.title", converter=FunctionConverter(fail, int)
        )

        with pytest.raises(ValueError, match="cannot convert 0"):
            binding.bind()

        assert binding.is_inert
        assert not binding.destination_engine.is_active
        assert counter.listener_count() == 0
        assert counter.get_value().count.listener_count() == 0
        assert form_root.listener_count() == 0


class TestUnbind:
    """Test unbind()."""

    def test_unbind_removes_every_listener(self, form_root, owned_root):
        binding = EasyBinding(form_root, "root.title", owned_root, "root.house.owner.name")
        binding.bind()
        house = owned_root.get_value().house.get_value()
        owner = house.owner.get_value()

        binding.unbind()

        assert binding.is_inert
        assert not binding.is_bound
        for observable in (
            form_root,
            form_title(form_root),
            owned_root,
            owned_root.get_value().house,
            house.owner,
            owner.name,
        ):
            assert observable.listener_count() == 0

    def test_no_sync_after_unbind(self, form_root, person_root):
        binding = EasyBinding(form_root, "root.title", person_root, "root.house.name")
        binding.bind()
        binding.unbind()

        house_name(person_root).set_value("Castle")
        person_root.get_value().house.set_value(House("Other"))

        assert form_title(form_root).get_value() == "Untitled"

    def test_unbind_twice_is_harmless(self, form_root, person_root):
        binding = EasyBinding(form_root, "root.title", person_root, "root.house.name")
        binding.bind()
        binding.unbind()
        binding.unbind()
        assert binding.is_inert

    def test_cannot_rebind(self, form_root, person_root):
        binding = EasyBinding(form_root, "root.title", person_root, "root.house.name")
        binding.bind()
        binding.unbind()

        with pytest.raises(BindingStateError):
            binding.bind()

    def test_unbind_before_bind_makes_inert(self, form_root, person_root):
        binding = EasyBinding(form_root, "root.title", person_root, "root.house.name")
        binding.unbind()

        with pytest.raises(BindingStateError):
            binding.bind()
