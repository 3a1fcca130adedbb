"""Hello World — the simplest muxer app.

Demonstrates routes, return-value content negotiation, path parameters,
Response chaining, and custom error handlers.

Run:
    python app.py
"""

from muxer import Mux, Request, Response

mux = Mux()


@mux.route("GET", "/")
def index(request: Request):
    return "Hello, World!"


@mux.route("GET", "greet/{name}")
def greet(request: Request):
    return f"Hello, {request.path_params['name']}!"


@mux.route("GET", "status")
def status(request: Request):
    return {"status": "ok", "version": "0.1.0"}


@mux.route("POST", "custom")
def custom(request: Request):
    return Response("Created").with_status(201).with_header("X-Custom", "muxer")


@mux.error(404)
def not_found(request: Request):
    return f"Nothing at {request.path}"


if __name__ == "__main__":
    mux.run()
