from django import forms
from django.contrib.auth import get_user_model, authenticate

UserModel = get_user_model()


class LoginForm(forms.Form):
    username = forms.CharField(max_length=150)
    password = forms.CharField(widget=forms.PasswordInput)

    def __init__(self, *args, **kwargs):
        self.request = kwargs.pop('request', None)
        super().__init__(*args, **kwargs)

    def clean(self):
        cleaned_data = super().clean()
        username = cleaned_data.get('username')
        password = cleaned_data.get('password')

        if username and password:
            user = authenticate(request=self.request, username=username, password=password)

            if not user:
                raise forms.ValidationError("Invalid credentials")

            cleaned_data['user'] = user
        return cleaned_data


class RegisterForm(forms.Form):
    username = forms.CharField(max_length=150)
    email = forms.EmailField()
    password = forms.CharField(widget=forms.PasswordInput)

    def clean(self):
        cleaned_data = super().clean()
        username = cleaned_data.get('username')
        email = cleaned_data.get('email')

        if username and email and UserModel.objects.taken(username, email):
            raise forms.ValidationError("Username or email already exists.")

        return cleaned_data

    def save(self):
        return UserModel.objects.create_user(
            self.cleaned_data['username'],
            self.cleaned_data['email'],
            self.cleaned_data['password'],
        )
