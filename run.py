#!/usr/bin/env python3
"""
TuneLoop - music discovery API

Single entry point for the development server.
Run with: python run.py
"""

from dotenv import load_dotenv
load_dotenv()

from config import config
from tuneloop import create_app

app = create_app()

if __name__ == '__main__':
    print(f"""
    ╔═══════════════════════════════════════╗
    ║                                       ║
    ║     🎵  T U N E L O O P  🎵           ║
    ║     Music discovery API               ║
    ║                                       ║
    ╚═══════════════════════════════════════╝

    🌐 API: http://localhost:{config.PORT}{config.API_PREFIX}
    🩺 Health: http://localhost:{config.PORT}{config.API_PREFIX}/health

    Press Ctrl+C to stop
    """)

    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT, threaded=True)
