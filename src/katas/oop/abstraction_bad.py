"""Abstraction - anti-pattern.

Connection details are public and the caller has to drive the protocol by
hand: authenticate, connect, send, disconnect, in that order.
"""


class EmailSender:
    def __init__(self):
        self.smtp_server = "smtp.gmail.com"
        self.smtp_port = 587
        self.is_connected = False
        self.is_authenticated = False
        self.username = None
        self.password = None

    def authenticate(self, username, password):
        self.username = username
        self.password = password
        self.is_authenticated = True

    def connect_to_server(self):
        if not self.is_authenticated:
            return False
        self.is_connected = True
        return True

    def send_email(self, to, subject, body):
        if not self.is_connected:
            return False
        print(f"Enviando email a {to} via {self.smtp_server}:{self.smtp_port}: {subject}")
        return True

    def disconnect(self):
        self.is_connected = False
