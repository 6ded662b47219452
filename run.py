import os
import sys

from backend.estg_portal import create_app

try:
    app = create_app()
except ValueError as e:
    print(f"\n--- CONFIGURATION ERROR ---\nThe application failed to start: {e}\nCheck the environment variables.\n---------------------------\n")
    app = None

if __name__ == '__main__':
    if app is None:
        sys.exit(1)

    port = int(os.environ.get("PORT", 8000))
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=port, use_reloader=False)
