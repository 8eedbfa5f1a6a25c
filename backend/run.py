from lowcard import create_app, socketio

app = create_app()

if __name__ == '__main__':
    # Threaded dev server; the table lock serialises game events
    socketio.run(app, host=app.config['HOST'], port=app.config['PORT'], allow_unsafe_werkzeug=True)
