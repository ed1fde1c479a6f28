import serverless_wsgi
from app import create_app
from logger import configure_logger

configure_logger()
app = create_app()


def handler(event, context):
    """
    Serverless function entry point:
    Routes incoming requests to the Flask WSGI application.
    """
    return serverless_wsgi.handle_request(app, event, context)
