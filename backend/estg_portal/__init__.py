from flask import Flask, g
from werkzeug.middleware.proxy_fix import ProxyFix

from .config.logging_config import setup_logging
from .core.extensions import csrf, init_compress, init_limiter


def create_app(test_config=None):
    app = Flask(__name__,
                static_folder='../../frontend/static',
                template_folder='../../frontend/templates')

    app.wsgi_app = ProxyFix(
        app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1
    )

    from .config import Config
    app.config.from_object(Config)

    if test_config is not None:
        app.config.from_mapping(test_config)

    setup_logging(app)

    from .config.sentry_config import init_sentry
    init_sentry(app)

    csrf.init_app(app)
    init_limiter(app)
    init_compress(app)

    from .security.middleware import configure_cors, init_security_headers
    init_security_headers(app)
    configure_cors(app)

    from .common.utils import excerpt, format_date_long, is_truncated
    app.jinja_env.filters['format_date_long'] = format_date_long
    app.jinja_env.filters['excerpt'] = excerpt
    app.jinja_env.tests['truncated'] = is_truncated

    from .gateway import close_api_client
    app.teardown_appcontext(close_api_client)

    from .blueprints.adminpanel import visible_tabs
    from .constants import CONTACT_EMAIL, SITE_NAME, TAB_PROFILE

    @app.context_processor
    def inject_site():
        profile = g.get('profile')
        return {
            'site_name': SITE_NAME,
            'contact_email': CONTACT_EMAIL,
            'current_profile': profile,
            'panel_tabs': visible_tabs(profile) if profile else [],
            'TAB_PROFILE': TAB_PROFILE,
        }

    from .blueprints.adminpanel import adminpanel_bp
    from .blueprints.auth import auth_bp
    from .blueprints.health import health_bp
    from .blueprints.management import management_bp
    from .blueprints.profile import profile_bp
    from .blueprints.public import public_bp

    csrf.exempt(health_bp)

    app.register_blueprint(public_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(adminpanel_bp)
    app.register_blueprint(management_bp)
    app.register_blueprint(profile_bp)
    app.register_blueprint(health_bp)

    from .common.error_handlers import init_error_handlers
    init_error_handlers(app)

    app.logger.info(f"ESTG-TSS portal started (API: {app.config['API_URL']})")
    return app
