import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Socket.IO server bind
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Comma separated list, '*' allows any origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    # Phase timers (seconds)
    JOIN_PHASE_SEC = int(os.environ.get('JOIN_PHASE_SEC', '30'))
    DRAW_PHASE_SEC = int(os.environ.get('DRAW_PHASE_SEC', '30'))
    # Display names are trimmed and capped to this length
    MAX_NAME_LENGTH = int(os.environ.get('MAX_NAME_LENGTH', '24'))
