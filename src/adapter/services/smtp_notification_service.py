import logging
import smtplib
from email.mime.text import MIMEText
from email.utils import formataddr
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from src.libs.result import Error, Result, Return
from src.app.services.notification_service import INotificationService

logger = logging.getLogger(__name__)


class SmtpNotificationService(INotificationService):
    """
    SMTP implementation of the notification dispatcher.

    smtplib is blocking, so delivery runs in the threadpool with a connect
    timeout. When no SMTP host is configured every send fails, which makes
    the reset flow invalidate the token instead of pretending it was mailed.
    """

    def __init__(
        self,
        host: Optional[str],
        port: int = 587,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: bool = True,
        timeout: float = 30,
        mail_from: Optional[str] = None,
        mail_from_name: str = "Job Portal",
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout
        self.mail_from = mail_from or username
        self.mail_from_name = mail_from_name

    @classmethod
    def from_config(cls, config) -> "SmtpNotificationService":
        return cls(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            username=config.SMTP_USER,
            password=config.SMTP_PASSWORD,
            use_tls=config.SMTP_USE_TLS,
            timeout=config.SMTP_TIMEOUT,
            mail_from=config.MAIL_FROM,
            mail_from_name=config.MAIL_FROM_NAME,
        )

    def _build_message(self, to: str, subject: str, html: str) -> MIMEText:
        msg = MIMEText(html, "html", "utf-8")
        msg["Subject"] = subject
        msg["From"] = formataddr((self.mail_from_name, self.mail_from))
        msg["To"] = to
        return msg

    def _deliver(self, to: str, subject: str, html: str) -> None:
        msg = self._build_message(to, subject, html)
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            if self.username and self.password:
                server.login(self.username, self.password)
            server.sendmail(self.mail_from, [to], msg.as_string())

    async def send(self, to: str, subject: str, html: str) -> Result[None]:
        if not self.host or not self.mail_from:
            logger.warning("Email transport is not configured; message not sent")
            return Return.err(Error("DELIVERY_FAILURE", "Email transport is not configured"))

        try:
            await run_in_threadpool(self._deliver, to, subject, html)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP error sending '{subject}': {e.__class__.__name__}: {e}")
            return Return.err(Error("DELIVERY_FAILURE", "Email could not be delivered"))

        logger.info(f"Email '{subject}' sent")
        return Return.ok(None)
