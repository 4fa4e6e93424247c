from pictionary.server import create_app

# gunicorn -k eventlet -w 1 wsgi:app
app, socketio = create_app()
