"""Interview sections and questions for the interview flow."""

from __future__ import annotations

from typing import Optional

from docbuilder.catalog.models import Question, QuestionType, Section, SelectionOption


def _option(
    option_id: str,
    label: str,
    icon: Optional[str] = None,
    description: Optional[str] = None,
) -> SelectionOption:
    return SelectionOption(id=option_id, label=label, icon=icon, description=description)


INTERVIEW_SECTIONS: list[Section] = [
    Section(
        id="vision",
        title="Project Vision",
        icon="🎯",
        questions=[
            Question(
                id="purpose",
                title="What is the primary purpose of your project?",
                type=QuestionType.SINGLE,
                options=[
                    _option("saas", "SaaS Product", description="Subscription-based software service"),
                    _option("marketplace", "Marketplace", description="Connect buyers and sellers"),
                    _option("ecommerce", "E-commerce", description="Sell products online"),
                    _option("internal", "Internal Tool", description="Business operations tool"),
                    _option("content", "Content Platform", description="Publishing and media"),
                    _option("social", "Social Network", description="Community and connections"),
                ],
                allow_details=True,
            ),
            Question(
                id="target-users",
                title="Who are your target users?",
                type=QuestionType.MULTIPLE,
                options=[
                    _option("consumers", "Consumers", description="Individual end users"),
                    _option("businesses", "Businesses", description="Small to medium businesses"),
                    _option("enterprises", "Enterprises", description="Large organizations"),
                    _option("developers", "Developers", description="Technical users"),
                ],
                allow_details=True,
            ),
        ],
    ),
    Section(
        id="tech",
        title="Technical Stack",
        icon="⚙️",
        questions=[
            Question(
                id="frontend",
                title="Choose your frontend framework",
                options=[
                    _option("react", "React", "⚛️"),
                    _option("vue", "Vue.js", "🟢"),
                    _option("nextjs", "Next.js", "▲"),
                    _option("svelte", "Svelte", "🔥"),
                ],
            ),
            Question(
                id="backend",
                title="Choose your backend technology",
                options=[
                    _option("nodejs", "Node.js", "🟩"),
                    _option("python", "Python", "🐍"),
                    _option("go", "Go", "🔵"),
                    _option("ruby", "Ruby", "💎"),
                ],
            ),
            Question(
                id="database",
                title="Select your database",
                options=[
                    _option("postgresql", "PostgreSQL", "🐘"),
                    _option("mongodb", "MongoDB", "🍃"),
                    _option("mysql", "MySQL", "🐬"),
                    _option("supabase", "Supabase", "⚡"),
                ],
            ),
        ],
    ),
    Section(
        id="features",
        title="Core Features",
        icon="✨",
        questions=[
            Question(
                id="auth",
                title="What authentication methods do you need?",
                type=QuestionType.MULTIPLE,
                options=[
                    _option("email", "Email/Password", "📧"),
                    _option("social", "Social Login", "🔗"),
                    _option("magic", "Magic Link", "✨"),
                    _option("sso", "Enterprise SSO", "🏢"),
                ],
                allow_details=True,
            ),
            Question(
                id="payments",
                title="Do you need payment processing?",
                options=[
                    _option("yes-stripe", "Yes - Stripe", "💳"),
                    _option("yes-other", "Yes - Other", "💰"),
                    _option("no", "No payments", "❌"),
                ],
                allow_details=True,
            ),
            Question(
                id="api-design",
                title="What API design approach will you use?",
                options=[
                    _option("rest", "REST API", "🔄", "Traditional RESTful API"),
                    _option("graphql", "GraphQL", "⚡", "Query language for APIs"),
                    _option("grpc", "gRPC", "🚀", "High performance RPC"),
                    _option("mixed", "Mixed/Hybrid", "🔀", "Combination of approaches"),
                ],
                allow_details=True,
            ),
            Question(
                id="real-time",
                title="Do you need real-time features?",
                options=[
                    _option("websockets", "WebSockets", "🔌", "Full-duplex communication"),
                    _option("sse", "Server-Sent Events", "📡", "Server-to-client streaming"),
                    _option("polling", "Polling", "🔁", "Regular interval requests"),
                    _option("no", "No real-time features", "❌"),
                ],
                allow_details=True,
            ),
            Question(
                id="file-storage",
                title="Do you need file upload and storage?",
                options=[
                    _option("s3", "AWS S3", "☁️", "Amazon S3 storage"),
                    _option("cloudinary", "Cloudinary", "🖼️", "Media management"),
                    _option("local", "Local Storage", "💾", "Server file system"),
                    _option("no", "No file storage", "❌"),
                ],
                allow_details=True,
            ),
            Question(
                id="search",
                title="Do you need search functionality?",
                options=[
                    _option("elastic", "Elasticsearch", "🔍", "Full-text search engine"),
                    _option("algolia", "Algolia", "⚡", "Hosted search service"),
                    _option("database", "Database Search", "🗄️", "Built-in database search"),
                    _option("no", "No search needed", "❌"),
                ],
                allow_details=True,
            ),
            Question(
                id="email-service",
                title="Do you need email/notification services?",
                type=QuestionType.MULTIPLE,
                options=[
                    _option("transactional", "Transactional Emails", "📧", "Account-related emails"),
                    _option("marketing", "Marketing Emails", "📣", "Bulk email campaigns"),
                    _option("push", "Push Notifications", "🔔", "Mobile/browser push"),
                    _option("sms", "SMS Notifications", "💬", "Text messages"),
                    _option("no", "No notifications", "❌"),
                ],
                allow_details=True,
            ),
        ],
    ),
    Section(
        id="quality",
        title="Quality & Operations",
        icon="🧪",
        questions=[
            Question(
                id="testing-strategy",
                title="What testing approaches will you use?",
                type=QuestionType.MULTIPLE,
                options=[
                    _option("unit", "Unit Tests", "🔬", "Test individual components"),
                    _option("integration", "Integration Tests", "🔗", "Test component interactions"),
                    _option("e2e", "End-to-End Tests", "🎯", "Test complete workflows"),
                    _option("manual", "Manual Testing", "👤", "Manual QA process"),
                ],
                allow_details=True,
            ),
            Question(
                id="deployment",
                title="What is your deployment preference?",
                options=[
                    _option("vercel", "Vercel", "▲", "Frontend platform"),
                    _option("netlify", "Netlify", "🌐", "Web hosting"),
                    _option("aws", "AWS", "☁️", "Amazon Web Services"),
                    _option("docker", "Docker/Kubernetes", "🐳", "Container orchestration"),
                    _option("heroku", "Heroku", "💜", "Platform as a Service"),
                ],
                allow_details=True,
            ),
            Question(
                id="monitoring",
                title="Do you need monitoring and logging?",
                options=[
                    _option("full", "Full Stack Monitoring", "📊", "APM, logs, metrics"),
                    _option("basic", "Basic Logging", "📝", "Application logs only"),
                    _option("later", "Add Later", "⏰", "Not needed initially"),
                ],
                allow_details=True,
            ),
        ],
    ),
]


def all_questions() -> list[Question]:
    """Return every interview question, flattened in section order."""
    return [q for section in INTERVIEW_SECTIONS for q in section.questions]


def get_question(question_id: str) -> Optional[Question]:
    """Return the question with *question_id*, or ``None``."""
    for question in all_questions():
        if question.id == question_id:
            return question
    return None
