from baucua import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # Werkzeug is fine here: rooms are in-memory, so the server is a single process anyway
    socketio.run(
        app,
        host='0.0.0.0',
        port=app.config['PORT'],
        debug=app.config['DEBUG'],
        allow_unsafe_werkzeug=True,
    )
