from config import get_settings_module

from src.team_checkin.team_checkin.core.constants import DEFAULT_PORT
from src.team_checkin.team_checkin.main import create_app, load_settings

app = create_app()

if __name__ == "__main__":
    settings = load_settings(get_settings_module())
    app.run(
        host=getattr(settings, "HOST", "0.0.0.0"),
        port=int(getattr(settings, "PORT", DEFAULT_PORT)),
        debug=bool(getattr(settings, "DEBUG", False)),
    )
