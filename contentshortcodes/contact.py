"""
Expand content shortcodes into HTML markup.

Copyright 2026, Content Shortcodes contributors
"""

from .extension import ShortcodeExtension
from .extra import override
from .formatting import hidden_input, join_classes
from .scanner import ContentModel, ShortcodeMatch, TagScanner

SUBMIT_TASK = "contactform.submit"
"Value of the hidden `task` field that routes the submission to the form handler."


class ContactFormExtension(ShortcodeExtension):
    """
    Expands `[contact_form email="..."]` into a contact form.

    The form posts to the current page. Hidden fields carry what the submission handler needs: the task name, the
    form identifier, an anti-forgery token (as the field name, with value `1`), and the recipient, subject and
    redirect target when given.
    """

    kind = "Contact form"
    scanner = TagScanner("contact_form", ContentModel.EMPTY)

    def _field(self, form_id: str, name: str, label_key: str, control: str) -> str:
        label = self.escape(self.services.translate(label_key))
        html = '<div class="mb-3">'
        html += f'<label for="{form_id}-{name}" class="form-label">{label} *</label>'
        html += control
        html += "</div>"
        return html

    @override
    def expand(self, match: ShortcodeMatch) -> str:
        attrs = match.attributes
        email = attrs.get("email", "")
        subject = attrs.get("subject", "Contact Form Submission")
        extra_class = attrs.get("class", "")
        redirect = attrs.get("redirect", "")

        form_id = self.escape(self.services.generate_id("contact-form"))
        form_class = join_classes("content-shortcodes-contact-form", extra_class)
        action = self.services.current_url()

        html = f'<form id="{form_id}" class="{self.escape(form_class)}" method="post" action="{self.escape(action)}">'
        html += hidden_input("task", SUBMIT_TASK, self.escape)
        html += f'<input type="hidden" name="form_id" value="{form_id}">'
        html += hidden_input(self.services.issue_form_token(), "1", self.escape)
        if email:
            html += hidden_input("to_email", email, self.escape)
        if subject:
            html += hidden_input("subject", subject, self.escape)
        if redirect:
            html += hidden_input("redirect", redirect, self.escape)

        html += self._field(
            form_id,
            "name",
            "NAME",
            f'<input type="text" class="form-control" id="{form_id}-name" name="name" required>',
        )
        html += self._field(
            form_id,
            "email",
            "EMAIL",
            f'<input type="email" class="form-control" id="{form_id}-email" name="email" required>',
        )
        html += self._field(
            form_id,
            "message",
            "MESSAGE",
            f'<textarea class="form-control" id="{form_id}-message" name="message" rows="5" required></textarea>',
        )

        html += f'<button type="submit" class="btn btn-primary">{self.escape(self.services.translate("SEND_MESSAGE"))}</button>'
        html += "</form>"

        return html
