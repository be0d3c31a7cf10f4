"""Tests for FormBuilder and the field widgets."""

from datetime import date

import pytest


@pytest.fixture
def form(qapp):
    from pyqt_formbuilder import FormBuilder

    return FormBuilder()


def test_text_field_registers_and_tracks_typing(form):
    from pyqt_formbuilder import FormBuilderTextField

    field = form.add_field(FormBuilderTextField(name="name"))
    assert form.fields["name"] is field.state

    field.control.setText("Ada")
    assert field.value == "Ada"
    form.save()
    assert form.value == {"name": "Ada"}


def test_form_initial_value_reaches_control(qapp):
    from pyqt_formbuilder import FormBuilder, FormBuilderTextField

    form = FormBuilder(initial_value={"name": "Bob"})
    field = form.add_field(FormBuilderTextField(name="name"))
    assert field.control.text() == "Bob"

    field.control.setText("Alice")
    form.reset()
    assert field.control.text() == "Bob"
    assert field.value == "Bob"


def test_value_transformer_applies_on_save(form):
    from pyqt_formbuilder import FormBuilderTextField, FormBuilderValidators

    form.add_field(FormBuilderTextField(
        name="age",
        initial_value="18",
        value_transformer=int,
        validator=FormBuilderValidators.integer(),
    ))
    assert form.save_and_validate()
    assert form.value == {"age": 18}


def test_error_and_helper_text_rendering(form):
    from pyqt_formbuilder import FormBuilderTextField, FormBuilderValidators, InputDecoration

    field = form.add_field(FormBuilderTextField(
        name="email",
        decoration=InputDecoration(label_text="Email", helper_text="We never share it"),
        validator=FormBuilderValidators.compose([
            FormBuilderValidators.required(error_text="Email is required"),
            FormBuilderValidators.email(error_text="Invalid email"),
        ]),
    ))
    assert field.label.text() == "Email"
    assert field.message_label.text() == "We never share it"

    validated = []
    form.validated.connect(validated.append)
    assert form.validate() is False
    assert validated == [False]
    assert field.message_label.text() == "Email is required"
    assert not field.message_label.isHidden()

    field.control.setText("nope")
    assert field.message_label.text() == "Invalid email"

    field.control.setText("ada@example.com")
    assert field.error_text is None
    assert field.message_label.text() == "We never share it"


def test_hint_text_becomes_placeholder(form):
    from pyqt_formbuilder import FormBuilderTextField, InputDecoration

    field = form.add_field(FormBuilderTextField(
        name="q", decoration=InputDecoration(hint_text="Search..."),
    ))
    assert field.control.placeholderText() == "Search..."


def test_obscure_multiline_rejected(qapp):
    from pyqt_formbuilder import FormBuilderTextField

    with pytest.raises(ValueError):
        FormBuilderTextField(name="pw", obscure_text=True, max_lines=3)


def test_multiline_text_field(form):
    from pyqt_formbuilder import FormBuilderTextField

    field = form.add_field(FormBuilderTextField(name="bio", max_lines=4))
    field.control.setPlainText("line one\nline two")
    assert field.value == "line one\nline two"


def test_value_changed_signals(form):
    from pyqt_formbuilder import FormBuilderTextField

    form_changes = []
    field_changes = []
    form.value_changed.connect(form_changes.append)
    field = form.add_field(FormBuilderTextField(name="name", on_changed=field_changes.append))

    field.control.setText("x")
    assert field_changes == ["x"]
    assert form_changes == [{"name": "x"}]


def test_patch_value_updates_controls(form):
    from pyqt_formbuilder import FormBuilderCheckbox, FormBuilderTextField

    text = form.add_field(FormBuilderTextField(name="name"))
    check = form.add_field(FormBuilderCheckbox(name="agree", title="I agree"))
    form.patch_value({"name": "Grace", "agree": True})
    assert text.control.text() == "Grace"
    assert check.control.isChecked()
    assert check.value is True


def test_duplicate_field_names_replace(form):
    from pyqt_formbuilder import FormBuilderTextField

    first = form.add_field(FormBuilderTextField(name="dup", initial_value="1"))
    second = form.add_field(FormBuilderTextField(name="dup", initial_value="2"))
    assert form.fields["dup"] is second.state

    form.remove_field(first)
    assert form.fields["dup"] is second.state


def test_remove_field_unregisters(form):
    from pyqt_formbuilder import FormBuilderTextField

    field = form.add_field(FormBuilderTextField(name="gone"))
    form.remove_field(field)
    assert "gone" not in form.fields


def test_form_of_finds_enclosing_form(form):
    from pyqt_formbuilder import FormBuilder, FormBuilderTextField

    field = form.add_field(FormBuilderTextField(name="a"))
    assert FormBuilder.of(field) is form
    assert FormBuilder.of(form) is None


def test_add_widget_registers_nested_fields(form):
    from PyQt6.QtWidgets import QVBoxLayout, QWidget
    from pyqt_formbuilder import FormBuilderTextField

    container = QWidget()
    layout = QVBoxLayout(container)
    layout.addWidget(FormBuilderTextField(name="first"))
    layout.addWidget(FormBuilderTextField(name="last"))
    form.add_widget(container)
    assert set(form.fields) == {"first", "last"}


def test_disabling_form_disables_controls(form):
    from pyqt_formbuilder import FormBuilderTextField

    field = form.add_field(FormBuilderTextField(name="a"))
    form.enabled = False
    assert not field.control.isEnabled()
    form.enabled = True
    assert field.control.isEnabled()


def test_skip_disabled_field(qapp):
    from pyqt_formbuilder import FormBuilder, FormBuilderTextField

    form = FormBuilder(skip_disabled=True)
    form.add_field(FormBuilderTextField(name="on", initial_value="1"))
    off = form.add_field(FormBuilderTextField(name="off", initial_value="2", enabled=False))
    assert not off.control.isEnabled()
    form.save()
    assert form.value == {"on": "1"}


def test_invalidate_field_shows_error(form):
    from pyqt_formbuilder import FormBuilderTextField

    field = form.add_field(FormBuilderTextField(name="user", initial_value="ada"))
    form.invalidate_field("user", "Username taken")
    assert field.message_label.text() == "Username taken"


def test_decoration_error_text_forces_invalid(form):
    from pyqt_formbuilder import FormBuilderTextField, InputDecoration

    form.add_field(FormBuilderTextField(
        name="a", initial_value="x", decoration=InputDecoration(error_text="Always wrong"),
    ))
    assert form.validate() is False
    assert form.errors == {"a": "Always wrong"}


def test_switch_and_checkbox(form):
    from pyqt_formbuilder import FormBuilderCheckbox, FormBuilderSwitch

    switch = form.add_field(FormBuilderSwitch(name="notify", title="Notifications"))
    form.add_field(FormBuilderCheckbox(name="tos", initial_value=True))
    switch.control.setChecked(True)
    form.save()
    assert form.value == {"notify": True, "tos": True}


def test_dropdown(form):
    from pyqt_formbuilder import FormBuilderDropdown, FormBuilderFieldOption

    field = form.add_field(FormBuilderDropdown(
        name="size",
        options=[FormBuilderFieldOption("s", "Small"), FormBuilderFieldOption("m", "Medium")],
        allow_clear=True,
    ))
    assert field.value is None
    assert field.control.currentIndex() == -1

    field.control.setCurrentIndex(1)
    assert field.value == "m"

    field.clear_button.click()
    assert field.value is None
    assert field.control.currentIndex() == -1


def test_searchable_dropdown_labels(form):
    from pyqt_formbuilder import FormBuilderSearchableDropdown

    field = form.add_field(FormBuilderSearchableDropdown(
        name="country",
        items=[{"code": "DE"}, {"code": "FR"}],
        item_as_string=lambda item: item["code"],
    ))
    assert field.control.itemText(1) == "FR"
    field.control.setCurrentIndex(0)
    assert field.value == {"code": "DE"}


def test_checkbox_group(form):
    from pyqt_formbuilder import FormBuilderCheckboxGroup

    field = form.add_field(FormBuilderCheckboxGroup(
        name="langs", options=["python", "dart", "go"], initial_value=["go"],
    ))
    assert field.control.get_value() == ["go"]
    field.control.buttons[0].setChecked(True)
    assert field.value == ["python", "go"]

    form.reset()
    assert field.control.get_value() == ["go"]


def test_radio_group(form):
    from pyqt_formbuilder import FormBuilderRadioGroup, OptionsOrientation

    field = form.add_field(FormBuilderRadioGroup(
        name="plan", options=["free", "pro"], orientation=OptionsOrientation.VERTICAL,
    ))
    assert field.value is None
    field.control.buttons[1].setChecked(True)
    assert field.value == "pro"
    field.control.buttons[0].setChecked(True)
    assert field.value == "free"
    assert not field.control.buttons[1].isChecked()


def test_option_group_set_options_drops_stale_value(form):
    from pyqt_formbuilder import FormBuilderCheckboxGroup

    field = form.add_field(FormBuilderCheckboxGroup(
        name="tags", options=["a", "b"], initial_value=["a", "b"],
    ))
    field.set_options(["b", "c"])
    assert field.value == ["b"]
    assert field.control.get_value() == ["b"]


def test_choice_chip_can_be_cleared(form):
    from pyqt_formbuilder import FormBuilderChoiceChip

    field = form.add_field(FormBuilderChoiceChip(name="color", options=["red", "blue"]))
    field.control.buttons[0].setChecked(True)
    assert field.value == "red"
    field.control.buttons[0].setChecked(False)
    assert field.value is None


def test_filter_chips_max(form):
    from pyqt_formbuilder import FormBuilderFilterChips

    field = form.add_field(FormBuilderFilterChips(name="f", options=[1, 2, 3], max_chips=1))
    field.control.buttons[1].setChecked(True)
    assert field.value == [2]
    assert not field.control.buttons[0].isEnabled()


def test_segmented_control(form):
    from pyqt_formbuilder import FormBuilderSegmentedControl

    field = form.add_field(FormBuilderSegmentedControl(
        name="view", options=["day", "week"], initial_value="week",
    ))
    assert field.control.buttons[1].isChecked()
    field.control.buttons[0].setChecked(True)
    assert field.value == "day"


def test_slider(form):
    from pyqt_formbuilder import FormBuilderSlider, FormBuilderValidators

    field = form.add_field(FormBuilderSlider(
        name="volume", min=0, max=10, initial_value=4,
        validator=FormBuilderValidators.max(8, error_text="Too loud"),
    ))
    assert field.control.get_value() == 4
    assert field.value_label.text() == "4"

    field.control.setValue(9)
    assert field.value == 9
    assert field.error_text == "Too loud"


def test_range_slider(form):
    from pyqt_formbuilder import FormBuilderRangeSlider

    field = form.add_field(FormBuilderRangeSlider(name="price", min=0, max=100))
    assert field.control.get_value() == (0, 100)

    form.patch_value({"price": (20, 80)})
    assert field.control.get_value() == (20, 80)
    assert field.value == (20, 80)

    field.control.end_slider.setValue(50)
    assert field.value == (20, 50)


def test_date_time_picker(form):
    from pyqt_formbuilder import FormBuilderDateTimePicker, InputType

    field = form.add_field(FormBuilderDateTimePicker(
        name="birthday", input_type=InputType.DATE,
        first_date=date(1900, 1, 1), last_date=date(2100, 1, 1),
    ))
    assert field.control.get_value() is None

    form.patch_value({"birthday": date(1990, 6, 15)})
    assert field.control.get_value() == date(1990, 6, 15)

    form.reset()
    assert field.control.get_value() is None


def test_date_time_picker_rejects_inverted_bounds(qapp):
    from pyqt_formbuilder import FormBuilderDateTimePicker, InputType

    with pytest.raises(ValueError):
        FormBuilderDateTimePicker(
            name="d", input_type=InputType.DATE,
            first_date=date(2020, 1, 2), last_date=date(2020, 1, 1),
        )


def test_chips_input(form):
    from pyqt_formbuilder import FormBuilderChipsInput

    field = form.add_field(FormBuilderChipsInput(name="tags", max_chips=3))
    field.control.entry.setText("qt")
    field.control.entry.returnPressed.emit()
    assert field.value == ["qt"]
    assert field.control.entry.text() == ""


def test_typeahead_suggestions(form):
    from pyqt_formbuilder import FormBuilderTypeAhead

    fruits = ["apple", "apricot", "banana"]
    field = form.add_field(FormBuilderTypeAhead(
        name="fruit",
        suggestions_callback=lambda text: [f for f in fruits if f.startswith(text)],
        debounce_ms=0,
    ))
    field.refresh_suggestions("ap")
    assert field.control.suggestions() == ["apple", "apricot"]

    selected = []
    field.on_suggestion_selected = selected.append
    field._on_suggestion_activated("apricot")
    assert field.value == "apricot"
    assert field.control.text() == "apricot"
    assert selected == ["apricot"]


def test_focus_marks_field_touched(form):
    from PyQt6.QtCore import QEvent
    from PyQt6.QtGui import QFocusEvent
    from PyQt6.QtWidgets import QApplication
    from pyqt_formbuilder import FormBuilderTextField

    field = form.add_field(FormBuilderTextField(name="a"))
    assert not field.touched
    QApplication.sendEvent(field.control, QFocusEvent(QEvent.Type.FocusIn))
    assert field.touched


def test_deleted_field_leaves_form(form):
    from PyQt6 import sip
    from PyQt6.QtWidgets import QVBoxLayout, QWidget
    from pyqt_formbuilder import FormBuilderTextField, FormBuilderValidators

    container = QWidget()
    QVBoxLayout(container).addWidget(
        FormBuilderTextField(name="a", validator=FormBuilderValidators.required())
    )
    form.add_widget(container)
    assert "a" in form.fields

    sip.delete(container)
    assert "a" not in form.fields
    assert form.validate() is True
    form.save()
    form.reset()
    assert form.value == {}


def test_sliders_save_what_they_show(form):
    from pyqt_formbuilder import FormBuilderRangeSlider, FormBuilderSlider

    slider = form.add_field(FormBuilderSlider(name="s", min=0, max=10))
    span = form.add_field(FormBuilderRangeSlider(name="r", min=0, max=100))
    form.save()
    assert form.value == {"s": 0, "r": (0, 100)}
    assert slider.control.get_value() == 0
    assert span.control.get_value() == (0, 100)

    span.control.start_slider.setValue(30)
    form.reset()
    assert span.value == (0, 100)
    assert span.control.get_value() == (0, 100)


def test_slider_form_initial_value_wins_over_minimum(qapp):
    from pyqt_formbuilder import FormBuilder, FormBuilderSlider

    form = FormBuilder(initial_value={"s": 7})
    field = form.add_field(FormBuilderSlider(name="s", min=0, max=10))
    assert field.value == 7
    assert field.control.get_value() == 7


def test_patch_value_rejects_unoffered_option(form):
    from pyqt_formbuilder import FormBuilderRadioGroup, FormBuilderTextField

    plan = form.add_field(FormBuilderRadioGroup(name="plan", options=["free", "pro"]))
    note = form.add_field(FormBuilderTextField(name="note"))

    with pytest.raises(ValueError, match="plan"):
        form.patch_value({"plan": "gold", "note": "hi"})
    assert plan.value is None
    assert plan.control.get_value() is None
    assert note.value == "hi"

    form.patch_value({"plan": "pro"})
    assert plan.control.get_value() == "pro"


def test_rejected_values_leave_fields_unchanged(form):
    from pyqt_formbuilder import (
        FormBuilderDateTimePicker, FormBuilderDropdown, FormBuilderFilterChips,
        FormBuilderRangeSlider, InputType,
    )

    span = form.add_field(FormBuilderRangeSlider(name="r", min=0, max=10, initial_value=(2, 8)))
    with pytest.raises(ValueError):
        span.did_change((9, 1))
    assert span.value == (2, 8)
    assert span.control.get_value() == (2, 8)

    size = form.add_field(FormBuilderDropdown(name="size", options=["s", "m"]))
    with pytest.raises(ValueError):
        size.did_change("xl")
    assert size.value is None

    chips = form.add_field(FormBuilderFilterChips(name="f", options=[1, 2, 3], max_chips=1))
    with pytest.raises(ValueError):
        chips.did_change([1, 2])
    assert chips.value is None

    day = form.add_field(FormBuilderDateTimePicker(name="d", input_type=InputType.DATE))
    with pytest.raises(TypeError):
        day.did_change("2024-01-01")
    assert day.value is None
    day.did_change(date(2024, 1, 1))
    assert day.control.get_value() == date(2024, 1, 1)


def test_form_autovalidate_always_emits_validated(qapp):
    from pyqt_formbuilder import (
        AutovalidateMode, FormBuilder, FormBuilderTextField, FormBuilderValidators,
    )

    form = FormBuilder(autovalidate_mode=AutovalidateMode.ALWAYS)
    results = []
    form.validated.connect(results.append)
    first = form.add_field(FormBuilderTextField(name="a"))
    form.add_field(FormBuilderTextField(name="b", validator=FormBuilderValidators.required()))

    first.control.setText("x")
    assert results == [False]

    form.save_and_validate()
    assert results == [False, False]
