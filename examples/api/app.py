"""API — a muxer mounted under ``/api`` with named routes.

Shows the routing table from the package docs: static and variable
segments, first-match ordering, and paths built back from route names.

Run:
    python app.py

Then:
    curl http://127.0.0.1:8000/api/users/42
    curl -X PUT http://127.0.0.1:8000/api/scores/7 -d '{"score": 10}'
"""

import threading

from muxer import Mux, MuxConfig, NotFound, Redirect, Request

mux = Mux(MuxConfig(base_path="/api"))

_scores: dict[str, int] = {}
_lock = threading.Lock()

PRODUCTS = ["pxyz", "pabc"]


@mux.route("GET", "users/{id}", name="profile")
def profile(request: Request):
    return {"id": request.path_params["id"]}


@mux.route("GET", "users/me")
def me(request: Request):
    # Shadowed by users/{id}, which was registered first
    return "never reached"


@mux.route("GET", "products", name="list")
def products(request: Request):
    return {"products": [mux.build_path("product", p) for p in PRODUCTS]}


@mux.route("PUT", "products/{id}/do", name="product")
def product_action(request: Request):
    product_id = request.path_params["id"]
    if product_id not in PRODUCTS:
        raise NotFound(f"No product {product_id!r}")
    return {"id": product_id, "done": True}


@mux.route("GET", "scores/{id}", name="score")
def get_score(request: Request):
    with _lock:
        score = _scores.get(request.path_params["id"])
    if score is None:
        raise NotFound("No score recorded")
    return {"id": request.path_params["id"], "score": score}


@mux.route("PUT", "scores/{id}")
async def put_score(request: Request):
    data = await request.json()
    with _lock:
        _scores[request.path_params["id"]] = int(data["score"])
    return Redirect(mux.build_path("score", request.path_params["id"]), status=303)


@mux.route("GET", "{domain}/{action}/{id}")
def generic(request: Request):
    return request.path_params.encode()


@mux.route("POST", "{domain}/{action}/{id}", name="whatever")
def whatever(request: Request):
    return dict(request.path_params), 201


if __name__ == "__main__":
    mux.run()
