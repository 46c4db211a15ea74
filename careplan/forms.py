from django import forms


class SurveyForm(forms.Form):
    # every answer is free text and optional, the model copes with blanks
    hair_type = forms.CharField(required=False, label="Hair type")
    hair_texture = forms.CharField(required=False, label="Hair texture")
    porosity = forms.CharField(required=False, label="Hair porosity")
    scalp_condition = forms.CharField(required=False, label="Scalp condition")
    product_use = forms.CharField(required=False, widget=forms.Textarea(attrs={'rows': 2}), label="Products you use")
    styling_habits = forms.CharField(required=False, widget=forms.Textarea(attrs={'rows': 2}), label="Styling habits")
    hair_goals = forms.CharField(required=False, widget=forms.Textarea(attrs={'rows': 2}), label="Hair goals")
    lifestyle = forms.CharField(required=False, widget=forms.Textarea(attrs={'rows': 2}), label="Lifestyle")
