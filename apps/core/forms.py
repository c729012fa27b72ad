from django import forms

from config.constants.limits import (
    CONTACT_NAME_MAX_LENGTH, CONTACT_COMPANY_MAX_LENGTH,
    CONTACT_PHONE_MAX_LENGTH, CONTACT_MESSAGE_MAX_LENGTH, CONTACT_MESSAGE_ROWS,
)
from .content import SERVICE_CHOICES

INPUT_CLASSES = 'w-full px-3 py-2 border rounded-lg focus:outline-none focus:ring-2 focus:ring-blue-500'


class ContactForm(forms.Form):
    name = forms.CharField(label="Full Name", max_length=CONTACT_NAME_MAX_LENGTH)
    email = forms.EmailField(label="Email Address")
    phone = forms.CharField(label="Phone Number", max_length=CONTACT_PHONE_MAX_LENGTH, required=False)
    company = forms.CharField(label="Company", max_length=CONTACT_COMPANY_MAX_LENGTH, required=False)
    service = forms.ChoiceField(
        label="Service of Interest",
        choices=[('', 'Select a service')] + SERVICE_CHOICES,
        required=False,
    )
    message = forms.CharField(
        label="Your Message",
        max_length=CONTACT_MESSAGE_MAX_LENGTH,
        widget=forms.Textarea(attrs={'rows': CONTACT_MESSAGE_ROWS}),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Add basic styling
        for field in self.fields.values():
            field.widget.attrs.update({'class': INPUT_CLASSES})

    def clean_name(self):
        return self.cleaned_data['name'].strip()

    def clean_message(self):
        message = self.cleaned_data['message'].strip()
        if not message:
            raise forms.ValidationError("Please enter a message.")
        return message
