"""Writer that sends each payload as an email."""

import smtplib
from collections.abc import Mapping
from email.message import EmailMessage

DEFAULT_PORT = 25


class SMTPWriter:
    """Sends every payload as the body of one email.

    Usually wrapped in a buffer so that a batch of records becomes one
    message. Delivery failures surface as smtplib.SMTPException, which is
    an OSError.
    """

    def __init__(
        self,
        host: str,
        send_to: list[str],
        username: str = "",
        password: str = "",
        subject: str = "",
        port: int = DEFAULT_PORT,
        timeout: float = 30.0,
    ) -> None:
        if not host:
            raise ValueError("missing required attribute [host]")
        if not send_to:
            raise ValueError("at least one recipient is required in [sendTo]")
        self.host = host
        self.port = port
        self.send_to = list(send_to)
        self.username = username
        self.password = password
        self.subject = subject
        self.timeout = timeout

    @classmethod
    def from_attrs(cls, attrs: Mapping[str, str]) -> "SMTPWriter":
        """Construct from ``host``, ``sendTo``, ``username``, ``password``, ``subject``.

        ``host`` may carry a port (``mail.example.com:587``). ``sendTo``
        is a semicolon separated list of addresses.
        """
        host, port = _split_host(attrs.get("host", ""))
        recipients = [
            address.strip()
            for address in attrs.get("sendTo", "").split(";")
            if address.strip()
        ]
        return cls(
            host=host,
            port=port,
            send_to=recipients,
            username=attrs.get("username", ""),
            password=attrs.get("password", ""),
            subject=attrs.get("subject", ""),
        )

    def build_message(self, data: bytes) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = self.subject
        message["From"] = self.username or f"logtree@{self.host}"
        message["To"] = ", ".join(self.send_to)
        message.set_content(data.decode("utf-8", errors="replace"))
        return message

    def write(self, data: bytes) -> int:
        message = self.build_message(data)
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            server.ehlo()
            if server.has_extn("starttls"):
                server.starttls()
                server.ehlo()
            if self.username:
                server.login(self.username, self.password)
            server.send_message(message)
        return len(data)


def _split_host(value: str) -> tuple[str, int]:
    host, sep, port = value.strip().rpartition(":")
    if not sep:
        return value.strip(), DEFAULT_PORT
    try:
        return host, int(port)
    except ValueError:
        raise ValueError(f"invalid port in host [{value}]") from None
