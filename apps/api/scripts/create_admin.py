"""Admin credential helpers.

``hash`` prints a value for ADMIN_PASSWORD_HASH; ``user`` creates or resets a
database admin account.
"""
from __future__ import annotations

import argparse
import asyncio
import getpass

from sqlalchemy import or_, select

from estate_api.core.config import DatabaseSettings, load_settings
from estate_api.core.security import hash_password
from estate_api.db.session import Database
from estate_api.models.user import User, UserRole


def _read_password(value: str | None) -> str:
	if value:
		return value
	password = getpass.getpass("Password: ")
	if password != getpass.getpass("Repeat password: "):
		raise SystemExit("Passwords do not match")
	if not password:
		raise SystemExit("Password must not be empty")
	return password


async def upsert_admin(database: Database, username: str, password: str, email: str | None) -> User:
	"""Create the admin account, or reset the password of an existing one."""

	async with database.sessionmaker() as session:
		async with session.begin():
			conditions = [User.username == username]
			if email:
				conditions.append(User.email == email)
			user = await session.scalar(select(User).where(or_(*conditions)))
			if user is None:
				user = User(username=username, email=email)
				session.add(user)
			user.password_hash = hash_password(password)
			user.role = UserRole.ADMIN
			user.is_active = True
	return user


async def _create_user(args: argparse.Namespace) -> None:
	settings = load_settings(DatabaseSettings)
	database = Database(settings.database_async_url, echo=settings.database_echo)
	try:
		await database.create_all()
		user = await upsert_admin(database, args.username, _read_password(args.password), args.email)
	finally:
		await database.dispose()
	print(f"Admin user {user.username} is ready (id={user.id}).")


def main(argv: list[str] | None = None) -> None:
	parser = argparse.ArgumentParser(description=__doc__)
	commands = parser.add_subparsers(dest="command", required=True)

	hash_cmd = commands.add_parser("hash", help="Print a password hash for ADMIN_PASSWORD_HASH")
	hash_cmd.add_argument("--password")

	user_cmd = commands.add_parser("user", help="Create or reset a database admin account")
	user_cmd.add_argument("username")
	user_cmd.add_argument("--email")
	user_cmd.add_argument("--password")

	args = parser.parse_args(argv)
	if args.command == "hash":
		print(hash_password(_read_password(args.password)))
	else:
		asyncio.run(_create_user(args))


if __name__ == "__main__":
	main()
