import click
from estately import db
from estately.models.user import User


def promote_to_admin(email):
    """Give the user with this email the ADMIN role; returns the user or None"""
    user = User.query.filter_by(email=email.strip().lower()).first()
    if not user:
        return None
    if user.role != 'ADMIN':
        user.role = 'ADMIN'
        db.session.commit()
    return user


def register_commands(app):
    @app.cli.command('promote-admin')
    @click.argument('email')
    def promote_admin_command(email):
        """Grant ADMIN to an existing user."""
        user = promote_to_admin(email)
        if not user:
            raise click.ClickException(f'No user with email {email}')
        click.echo(f'{user.email} is now an admin.')
