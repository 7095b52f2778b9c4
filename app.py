# contactdesk - local entry point
# Serves the contact form API on PORT (default 5000)

from contactdesk import create_app, shutdown_store

app = create_app()


if __name__ == '__main__':
    app.logger.info(f"Server is running on port {app.config['PORT']}")
    try:
        app.run(host='0.0.0.0', port=app.config['PORT'], threaded=True)
    finally:
        shutdown_store(app)
