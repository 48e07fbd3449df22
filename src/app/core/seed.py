"""Demo data loaded at startup so a fresh UI has something to show."""

from src.app.core.logging import get_logger
from src.app.models import ChatMessage, MessageRole
from src.app.repositories import Store
from src.app.schemas import AIConversationCreate, FileCreate, ProjectCreate, UserCreate
from src.app.services import UserService

logger = get_logger(__name__)

DEMO_USERNAME = "demouser"

_REACT_ANSWER = """Here's a simple React component example:

```jsx
import React from "react";

const MyComponent = ({ title }) => {
  return <div>{title}</div>;
};

export default MyComponent;
```

You can use this component in another file by importing it and using it like this:

```jsx
import MyComponent from "./MyComponent";

function App() {
  return <MyComponent title="Hello World" />;
}
```"""


async def seed_demo_data(store: Store) -> None:
    """Create the demo user with one project, two files and one conversation.

    Does nothing if the demo user already exists.
    """
    if await store.users.exists_by_username(DEMO_USERNAME):
        return

    user = await UserService(store.users).register(
        UserCreate(
            username=DEMO_USERNAME,
            password="password123",
            email="demo@devsandbox.ai",
            full_name="Demo User",
            avatar_url=f"https://api.dicebear.com/7.x/avataaars/svg?seed={DEMO_USERNAME}",
        )
    )
    project = await store.projects.create(
        ProjectCreate(
            name="My First Project",
            description="A sample project to demonstrate DevSandbox capabilities",
            owner_id=user.id,
            is_public=True,
        )
    )
    await store.files.create(
        FileCreate(
            project_id=project.id,
            name="index.js",
            path="/src/index.js",
            content='console.log("Hello, DevSandbox!");',
            language="javascript",
        )
    )
    await store.files.create(
        FileCreate(
            project_id=project.id,
            name="styles.css",
            path="/src/styles.css",
            content='body { font-family: "Open Sans", sans-serif; }',
            language="css",
        )
    )
    await store.ai_conversations.create(
        AIConversationCreate(
            user_id=user.id,
            project_id=project.id,
            messages=(
                ChatMessage(role=MessageRole.USER, content="How do I create a React component?"),
                ChatMessage(role=MessageRole.ASSISTANT, content=_REACT_ANSWER),
            ),
        )
    )
    logger.info("Seeded demo data", user_id=user.id, project_id=project.id)
