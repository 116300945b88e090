"""Single Responsibility - anti-pattern.

``User`` holds data, validates it, sends email and writes itself to a file.
Any change to mail or storage forces a change to the user class.
"""


class User:
    def __init__(self, name, email):
        self.name = name
        self.email = email

    def get_name(self):
        return self.name

    def get_email(self):
        return self.email

    def validate_email(self):
        return "@" in self.email

    def send_welcome_email(self):
        return f"Enviando email de bienvenida a {self.email}"

    def save_to_file(self):
        return f"Guardando usuario {self.name} en archivo users.txt"
