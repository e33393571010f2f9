# bloglist/extensions.py
from flask_cors import CORS
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

# expire_on_commit=False: los objetos devueltos por los servicios siguen
# legibles después del commit; las lecturas usan populate_existing.
db = SQLAlchemy(session_options={"expire_on_commit": False})
migrate = Migrate()
cors = CORS()
