from webapp.routes import auth, general, nutrition, progress, workouts

routers = (
    general.router,
    auth.router,
    workouts.router,
    progress.router,
    nutrition.router,
)

__all__ = ["routers"]
