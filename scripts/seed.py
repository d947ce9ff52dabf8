"""Populate the database with demo users and articles."""
import asyncio
import argparse
import random
import time

from pressroom.database import engine, async_session, Base
from pressroom.models import User, Article
from pressroom.security import hash_password

TOPICS = ["python", "fastapi", "postgresql", "docker", "testing", "security",
          "performance", "devops", "typescript", "rest-api"]

DEMO_PASSWORD = "password123"


async def seed(num_users: int, articles_per_user: int, reset: bool):
    print(f"Seeding: {num_users} users, up to {num_users * articles_per_user} articles")
    start = time.perf_counter()

    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    # One hash shared by every demo account keeps seeding fast.
    hashed = hash_password(DEMO_PASSWORD)

    async with async_session() as session:
        users = []
        for i in range(num_users):
            user = User(
                email=f"user_{i:04d}@example.com",
                password=hashed,
                name=f"User {i}",
                age=random.randint(18, 80),
            )
            session.add(user)
            users.append(user)
        await session.flush()
        print(f"  Created {len(users)} users")

        total_articles = 0
        for user in users:
            for _ in range(random.randint(0, articles_per_user)):
                topic = random.choice(TOPICS)
                session.add(Article(
                    title=f"Notes on {topic}",
                    description=f"{user.name} writes about working with {topic}.",
                    author_id=user.id,
                ))
                total_articles += 1
        await session.flush()
        print(f"  Created {total_articles} articles")

        await session.commit()

    await engine.dispose()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")
    print(f"  Login with any user_NNNN@example.com / {DEMO_PASSWORD}")


def main():
    parser = argparse.ArgumentParser(description="Seed the Pressroom database")
    parser.add_argument("--users", type=int, default=10, help="Number of users to create")
    parser.add_argument("--articles", type=int, default=3, help="Max articles per user")
    parser.add_argument("--reset", action="store_true", help="Drop existing tables first")
    args = parser.parse_args()
    asyncio.run(seed(args.users, args.articles, args.reset))


if __name__ == "__main__":
    main()
