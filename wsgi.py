from bibshelf.utils.logging_setup import setup_logging
from bibshelf.web import app as application

setup_logging()

if __name__ == "__main__":
    application.run(debug=True)
