from __future__ import annotations

from typing import Any

from jinja2 import Template


class EmailTemplates:
    def __init__(self) -> None:
        self.templates = {
            "job_application": Template(
                """
<html>
  <body style="background-color:#f5f5f5;font-family:-apple-system,BlinkMacSystemFont,'Segoe UI',Roboto,Helvetica,Arial,sans-serif;">
    <div style="margin:40px auto;padding:20px 48px 48px;max-width:560px;background-color:#ffffff;border-radius:12px;">
      <h1 style="text-align:center;">StudyLink</h1>
      <h2>Hello {{ company_name }}</h2>
      <p>You received a new application for your job posting <strong>{{ job_title }}</strong>.</p>

      <p><strong>Candidate</strong></p>
      <p>
        <strong>Name:</strong> {{ student_name }}<br>
        <strong>Email:</strong> {{ student_email }}
      </p>

      {% if subject or message %}<p><strong>Message from the candidate</strong></p>
      {% if subject %}<p><strong>Subject:</strong> {{ subject }}</p>{% endif %}
      {% if message %}<p style="background-color:#f9f9f9;padding:16px;border-radius:8px;white-space:pre-line;">{{ message }}</p>{% endif %}
      {% endif %}
      <p><a href="{{ application_url }}" style="background-color:#000000;color:#ffffff;padding:12px 20px;border-radius:8px;text-decoration:none;">View application</a></p>

      <hr>
      <p style="color:#8898aa;font-size:12px;">This email was sent automatically by StudyLink.</p>
    </div>
  </body>
</html>
                """.strip(),
                autoescape=True,
            ),
            "signin": Template(
                """
<html>
  <body style="font-family:-apple-system,BlinkMacSystemFont,'Segoe UI',Roboto,Helvetica,Arial,sans-serif;">
    <div style="margin:40px auto;max-width:560px;">
      <h1>StudyLink</h1>
      <p>Hello{% if firstname %} {{ firstname }}{% endif %},</p>
      <p>Use the link below to sign in. It expires in {{ ttl_minutes }} minutes.</p>
      <p><a href="{{ signin_url }}">Sign in to StudyLink</a></p>
      <p style="color:#8898aa;font-size:12px;">If you did not ask for this email you can ignore it.</p>
    </div>
  </body>
</html>
                """.strip(),
                autoescape=True,
            ),
        }

    def render(self, name: str, **context: Any) -> str:
        return self.templates[name].render(**context)


templates = EmailTemplates()
