"""Factory - anti-pattern.

The service decides which concrete class to build with an if/elif chain, so
every caller that needs a notification repeats (or depends on) that chain.
"""


class EmailNotification:
    def send(self, message):
        return f"EMAIL: {message}"


class SMSNotification:
    def send(self, message):
        return f"SMS: {message}"


class PushNotification:
    def send(self, message):
        return f"PUSH: {message}"


class NotificationService:
    def send_notification(self, kind, message):
        if kind == "email":
            notification = EmailNotification()
        elif kind == "sms":
            notification = SMSNotification()
        elif kind == "push":
            notification = PushNotification()
        else:
            return None
        return notification.send(message)
