from webforms import (
    Form, UserField, EmailField, SetPasswordFields, CheckboxField, ChoiceField, URLField
)


class SignupForm(Form):
    # "banco" em memória só para o exemplo
    users = {}

    def __init__(self, data=None, options=None):
        super().__init__(data, options)
        self.add_field('username', UserField(self.data.get('username')))
        self.add_field('email', EmailField(self.data.get('email')))
        self.add_field('password', SetPasswordFields(self.data.get('password1'), self.data.get('password2')))
        self.add_field('plan', ChoiceField(self.data.get('plan'), {'choices': ['free', 'pro']}))
        self.add_field('site', URLField(self.data.get('site'), {'absolute': True}))
        self.add_field('terms', CheckboxField(self.data.get('terms')))

    def persist(self, callback):
        username = self.fields['username'].value
        if username in self.users:
            callback(f"Usuário {username} já existe")
            return

        self.users[username] = {
            'email': self.fields['email'].value,
            'password': self.fields['password'].password1.encrypt(),
            'plan': self.fields['plan'].value,
            'terms': self.fields['terms'].value,
        }
        callback(None)


def report(error=None):
    print(f"Erro: {error}" if error else "Salvo com sucesso")


if __name__ == "__main__":
    data = {
        'username': 'alice',
        'email': 'alice@loja.com',
        'password1': 'segredo',
        'password2': 'segredo',
        'plan': 'pro',
        'site': 'https://alice.dev',
        'terms': 'on',
    }

    SignupForm(data).save(report)
    SignupForm(data).save(report)

    invalid = SignupForm(dict(data, username='bob', password2='outro'))
    print(f"Campos inválidos: {invalid.invalid_fields()}")
    invalid.save(report)
    invalid.save(report, validate=False)

    print(f"Usuários: {list(SignupForm.users)}")
