"""Serve a greeting in the visitor's language from a Werkzeug WSGI app.

The resolver is built once and shared by every request, so the per-address
geo cache is shared too. resolve_environ() reads REMOTE_ADDR and
HTTP_ACCEPT_LANGUAGE directly from the WSGI environ.

Run:
    GEOLOCALE_PROVISIONING=none python examples/wsgi_locale.py
    curl -H 'Accept-Language: de-AT,en;q=0.5' http://127.0.0.1:8000/
"""

from werkzeug.serving import run_simple
from werkzeug.wrappers import Request, Response

from geolocale import LocaleResolver

GREETINGS = {"en": "Hello", "de": "Hallo", "fr": "Bonjour", "es": "Hola"}

resolver = LocaleResolver.from_config()


@Request.application
def application(request: Request) -> Response:
    result = resolver.resolve_environ(request.environ)
    locale = result.best_match(GREETINGS, default="en")
    body = f"{GREETINGS[locale]}! (country={result.country}, languages={list(result.languages)})\n"
    return Response(body, headers={"Content-Language": locale, "Vary": "Accept-Language"})


if __name__ == "__main__":
    run_simple("127.0.0.1", 8000, application)
