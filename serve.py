# serve.py
# Live preview backend for the editor. Starts unconfigured on 127.0.0.1:8080;
# the editor picks the folder to serve with PATCH /setup {"directoryPath": "..."}.
from livepreview.server import main

if __name__ == '__main__':
    main()
