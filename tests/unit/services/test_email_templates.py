from src.app.services.email_templates import (
    build_reset_confirmation_email,
    build_reset_link_email,
)


def test_reset_link_email_embeds_url_and_expiry():
    subject, html = build_reset_link_email("http://frontend.test/reset-password?token=abc", 60)

    assert subject == "Password Reset Request - Job Portal"
    assert 'href="http://frontend.test/reset-password?token=abc"' in html
    assert "60 minutes" in html


def test_reset_link_email_escapes_url():
    _subject, html = build_reset_link_email('http://x.test/"><script>', 60)

    assert "<script>" not in html


def test_confirmation_email_has_no_link():
    subject, html = build_reset_confirmation_email()

    assert subject == "Password Reset Successful - Job Portal"
    assert "token=" not in html
