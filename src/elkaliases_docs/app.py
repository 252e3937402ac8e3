from flask import Flask, abort, jsonify, redirect

from .config import config
from .pages import get_page, render_page
from .utils.exceptions import PageNotFoundError
from .utils.logger import logger

app = Flask(__name__)

HOME_PATH = "/docs/providers/index.html"
PROVIDER_INDEX_PATH = "/docs/providers/elkaliases/index.html"


@app.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "up"}), 200


@app.route("/", methods=["GET"])
def home():
    return redirect(HOME_PATH)


# The sidebar links the provider page as idex.html
@app.route("/docs/providers/elkaliases/idex.html", methods=["GET"])
def provider_index_alias():
    return redirect(PROVIDER_INDEX_PATH)


@app.route("/docs/providers/<path:page_path>", methods=["GET"])
def docs_page(page_path):
    try:
        page = get_page(f"/docs/providers/{page_path}")
    except PageNotFoundError as e:
        logger.warning(str(e))
        abort(404)
    return render_page(page)


def main():
    port = config.get_int("docs_port")
    logger.info(f"Serving documentation on {config.docs_host}:{port}")
    app.run(host=config.docs_host, port=port,
            debug=True if config.log_level == "DEBUG" else False)


if __name__ == "__main__":
    main()
