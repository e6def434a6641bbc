from podium.backend.app.application.auth.dto import CreateSessionInputDTO, SessionCookieDTO

__all__ = ['CreateSessionInputDTO', 'SessionCookieDTO']
