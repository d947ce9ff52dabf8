# Services package.
#
# Each module exposes a focused set of async functions holding the
# business logic and database access for one concern:
#
#   user_service     — signup and profile update for User
#   auth_service     — credential check and token issuance
#   article_service  — creation and listing of Article
#
# All service functions accept an AsyncSession as their first argument
# so that the router layer controls the transaction boundary via the
# ``get_db`` dependency.
