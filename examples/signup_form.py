"""Signup form demo: text fields, a cross-field check and a terms switch."""

import logging
import sys

from PyQt6.QtWidgets import QApplication, QPushButton, QScrollArea

from pyqt_formbuilder import (
    FormBuilder,
    FormBuilderSwitch,
    FormBuilderTextField,
    FormBuilderValidators,
    InputDecoration,
    AutovalidateMode,
)

logger = logging.getLogger(__name__)


def build_signup_form() -> FormBuilder:
    form = FormBuilder(autovalidate_mode=AutovalidateMode.DISABLED)

    form.add_field(FormBuilderTextField(
        name="full_name",
        decoration=InputDecoration(label_text="Full Name"),
        validator=FormBuilderValidators.compose([
            FormBuilderValidators.required(),
        ]),
    ))
    form.add_field(FormBuilderTextField(
        name="email",
        decoration=InputDecoration(label_text="Email"),
        validator=FormBuilderValidators.compose([
            FormBuilderValidators.required(),
            FormBuilderValidators.email(),
        ]),
    ))
    form.add_field(FormBuilderTextField(
        name="password",
        obscure_text=True,
        decoration=InputDecoration(label_text="Password"),
        validator=FormBuilderValidators.compose([
            FormBuilderValidators.required(),
            FormBuilderValidators.min_length(6),
        ]),
    ))

    def passwords_match(value):
        if value != form.fields["password"].value:
            return "Passwords do not match"
        return None

    form.add_field(FormBuilderTextField(
        name="confirm_password",
        obscure_text=True,
        decoration=InputDecoration(label_text="Confirm Password"),
        validator=FormBuilderValidators.compose([passwords_match]),
    ))
    form.add_field(FormBuilderSwitch(
        name="accept_terms",
        title="I have read and accept the terms of service.",
        validator=FormBuilderValidators.compose([
            FormBuilderValidators.required(),
            FormBuilderValidators.equal(True, error_text="You must accept the terms"),
        ]),
    ))

    submit = QPushButton("Signup")

    def on_submit():
        if form.save_and_validate():
            logger.info("Valid")
        else:
            logger.info(f"Invalid: {form.errors}")
        logger.info(f"Value: {form.value}")

    submit.clicked.connect(on_submit)
    form.add_widget(submit)
    return form


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    app = QApplication(sys.argv)
    scroll = QScrollArea()
    scroll.setWidgetResizable(True)
    scroll.setWidget(build_signup_form())
    scroll.setWindowTitle("Signup")
    scroll.resize(420, 520)
    scroll.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
