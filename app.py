from flask import Flask, jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge

from errors import ParseError
from parsing import load_and_parse
from selection import ALL_RUNNERS
from views import DashboardState, assemble

ALLOWED_EXTENSIONS = ('.csv',)
DEFAULT_CONFIG = {
    'MAX_CONTENT_LENGTH': 5 * 1024 * 1024,
    'PORT': 5001,
}


def allowed_file(filename):
    return filename.lower().endswith(ALLOWED_EXTENSIONS)


def create_app(config=None):
    app = Flask(__name__)
    app.config.update(DEFAULT_CONFIG)
    # e.g. RUNNER_DASHBOARD_MAX_CONTENT_LENGTH=1048576
    app.config.from_prefixed_env('RUNNER_DASHBOARD')
    if config:
        app.config.update(config)

    @app.errorhandler(RequestEntityTooLarge)
    def too_large(e):
        return jsonify({"error": "File is too large."}), 413

    @app.errorhandler(ParseError)
    def parse_failed(e):
        # Error and data never coexist: the failed view carries no rows.
        app.logger.info("Rejected upload: %s", e.message)
        return jsonify(assemble(DashboardState.failed(e.message))), e.code

    @app.route("/api/health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/dashboard", methods=['POST'])
    def dashboard():
        # Nothing is kept between requests; every upload is parsed on its own.
        upload = request.files.get('file')
        if upload is None or not upload.filename:
            return jsonify({"error": "No file uploaded."}), 400
        if not allowed_file(upload.filename):
            return jsonify({"error": "Please upload a CSV file"}), 400

        selected = request.form.get('runner') or ALL_RUNNERS

        dataset = load_and_parse(upload.stream)
        app.logger.info("Loaded %d rows from %s", len(dataset), upload.filename)
        return jsonify(assemble(DashboardState.loaded(dataset, selected)))

    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True, port=app.config['PORT'])
