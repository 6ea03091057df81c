# blogfront/views.py
from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for

from .creation_form import MSG_CREATED, CreationForm, FormStatus
from .detail_view import load_article
from .list_view import load_articles

main_bp = Blueprint("main", __name__)


def _store():
    return current_app.extensions["record_store"]


def _cache():
    return current_app.extensions["query_cache"]


def _new_form(**kwargs):
    return CreationForm(default_cover=current_app.config["PLACEHOLDER_COVER_URL"], **kwargs)


def _render_home(selected_id=None, form=None, status=200):
    articles = load_articles(_cache(), _store(), selected_id)
    detail = load_article(_cache(), _store(), selected_id,
                          placeholder_cover=url_for("static", filename="placeholder.svg"))
    return render_template(
        "index.html",
        articles=articles,
        detail=detail,
        selected_id=selected_id,
        form=form or _new_form(),
        store_url=current_app.config["RECORD_STORE_URL"],
    ), status


@main_bp.get("/")
def index():
    return _render_home()


@main_bp.get("/articles/<int:aid>")
def article(aid):
    return _render_home(selected_id=aid)


@main_bp.get("/articles/new")
def new_article():
    return _render_home(selected_id=request.args.get("selected", type=int), form=_new_form(is_open=True))


@main_bp.post("/articles")
def create_article():
    selected_id = request.form.get("selected", type=int)
    form = CreationForm.from_mapping(request.form, default_cover=current_app.config["PLACEHOLDER_COVER_URL"])
    if form.submit(_store(), _cache()):
        flash(MSG_CREATED, "success")
        if selected_id is not None:
            return redirect(url_for("main.article", aid=selected_id))
        return redirect(url_for("main.index"))
    flash(form.error, "error")
    # validation failures never reached the store
    status = 502 if form.status is FormStatus.ERROR else 400
    return _render_home(selected_id=selected_id, form=form, status=status)
