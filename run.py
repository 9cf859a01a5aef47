import os
from dotenv import load_dotenv
load_dotenv()

env = os.environ.get('FLASK_ENV', 'development')
from promoboard import create_app, db, shutdown_app

app = create_app(env)

if __name__ == '__main__':
    with app.app_context():
        db.create_all()
    try:
        app.run(debug=(env == 'development'), port=int(os.environ.get('PORT', 3000)))
    finally:
        shutdown_app(app)
