from django import forms
from .models import Report


class ReportForm(forms.ModelForm):
    class Meta:
        model = Report
        fields = ["repo_id", "repo_full_name", "reason"]
        widgets = {
            "repo_id": forms.HiddenInput(),
            "repo_full_name": forms.HiddenInput(),
            "reason": forms.Textarea(
                attrs={
                    "class": "form-control",
                    "rows": 3,
                    "placeholder": "Why should this repository be hidden?",
                }
            ),
        }

    def __init__(self, *args, reporter=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.reporter = reporter

    def clean(self):
        cleaned_data = super().clean()
        repo_id = cleaned_data.get("repo_id")

        if repo_id is None or self.reporter is None:
            return cleaned_data

        duplicates = Report.objects.filter(
            repo_id=repo_id,
            reporter=self.reporter,
            valid=False,
        )
        if duplicates.exists():
            raise forms.ValidationError("You have already reported this repository.")

        return cleaned_data

    def save(self, commit=True):
        report = super().save(commit=False)
        report.reporter = self.reporter
        report.valid = False
        if commit:
            report.save()
        return report
