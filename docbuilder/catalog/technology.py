"""Technology maps: rationale, best practices and patterns per stack choice."""

from __future__ import annotations

from typing import Optional

from docbuilder.catalog.models import SelectionOption, TechnologyMap


# ---------------------------------------------------------------------------
# Frontend
# ---------------------------------------------------------------------------

FRONTEND_MAPS: dict[str, TechnologyMap] = {
    "react": TechnologyMap(
        name="React",
        description="Component-based UI library",
        rationale="Large ecosystem, excellent TypeScript support, component reusability",
        best_practices=[
            "Use functional components with hooks",
            "Implement proper prop types with TypeScript",
            "Follow component composition patterns",
            "Use React.memo for performance optimization",
            "Keep components small and focused",
            "Use custom hooks for reusable logic",
        ],
        patterns={
            "component": (
                "export const MyComponent: React.FC<Props> = ({ data }) => {\n"
                "  const [state, setState] = useState<State>({});\n"
                "\n"
                "  useEffect(() => {\n"
                "    // Side effects\n"
                "  }, [dependencies]);\n"
                "\n"
                "  return <div>{content}</div>;\n"
                "};"
            ),
            "stateManagement": "Context API or Zustand for global state",
            "routing": "React Router v6 with nested routes",
        },
        libraries=[
            "react-router-dom - Routing",
            "zustand - State management",
            "react-hook-form - Form handling",
            "react-query - Server state management",
        ],
    ),
    "vue": TechnologyMap(
        name="Vue.js",
        description="Progressive JavaScript framework",
        rationale="Gentle learning curve, excellent documentation, reactive data binding",
        best_practices=[
            "Use Composition API for better TypeScript support",
            "Keep components single-responsibility",
            "Use computed properties for derived state",
            "Leverage Vue 3 features like Suspense",
        ],
        patterns={
            "component": (
                '<script setup lang="ts">\n'
                "import { ref, computed } from 'vue'\n"
                "\n"
                "const count = ref(0)\n"
                "const doubled = computed(() => count.value * 2)\n"
                "</script>"
            ),
            "stateManagement": "Pinia for state management",
            "routing": "Vue Router with composition API",
        },
        libraries=[
            "vue-router - Routing",
            "pinia - State management",
            "vueuse - Composition utilities",
        ],
    ),
    "nextjs": TechnologyMap(
        name="Next.js",
        description="React framework with SSR and SSG",
        rationale="Built-in routing, SEO optimization, excellent performance",
        best_practices=[
            "Use App Router for new projects",
            "Leverage Server Components when possible",
            "Implement proper data fetching strategies",
            "Use Image component for optimization",
        ],
        patterns={
            "component": (
                "export default async function Page() {\n"
                "  const data = await fetchData()\n"
                "  return <div>{data}</div>\n"
                "}"
            ),
            "stateManagement": (
                "Server state with Server Components, client state with Context/Zustand"
            ),
            "routing": "File-based routing with App Router",
        },
        libraries=[
            "next-auth - Authentication",
            "swr - Client-side data fetching",
            "zustand - Client state management",
        ],
    ),
    "svelte": TechnologyMap(
        name="Svelte",
        description="Compile-time framework",
        rationale="No virtual DOM, smaller bundle sizes, simpler syntax",
        best_practices=[
            "Use stores for global state",
            "Leverage reactive declarations",
            "Keep components simple",
            "Use SvelteKit for full-stack apps",
        ],
        patterns={
            "component": (
                '<script lang="ts">\n'
                "  let count = 0\n"
                "  $: doubled = count * 2\n"
                "</script>"
            ),
            "stateManagement": "Svelte stores",
            "routing": "SvelteKit file-based routing",
        },
        libraries=[
            "sveltekit - Full-stack framework",
            "svelte-forms-lib - Form handling",
        ],
    ),
}


# ---------------------------------------------------------------------------
# Backend
# ---------------------------------------------------------------------------

BACKEND_MAPS: dict[str, TechnologyMap] = {
    "nodejs": TechnologyMap(
        name="Node.js with Express",
        description="JavaScript runtime for building scalable server-side applications",
        rationale="JavaScript everywhere, large ecosystem, excellent for APIs",
        best_practices=[
            "Use async/await for asynchronous operations",
            "Implement proper error handling middleware",
            "Use environment variables for configuration",
            "Follow MVC or layered architecture",
            "Use TypeScript for type safety",
            "Implement request validation",
        ],
        patterns={
            "controller": (
                "export const createUser = async (req: Request, res: Response, "
                "next: NextFunction) => {\n"
                "  try {\n"
                "    const user = await userService.create(req.body);\n"
                "    res.status(201).json(user);\n"
                "  } catch (error) {\n"
                "    next(error);\n"
                "  }\n"
                "};"
            ),
            "middleware": "Express middleware for auth, validation, error handling",
            "database": "TypeORM or Prisma for database access",
        },
        libraries=[
            "express - Web framework",
            "prisma - Database ORM",
            "joi - Validation",
            "jsonwebtoken - JWT handling",
        ],
    ),
    "python": TechnologyMap(
        name="Python with Django/FastAPI",
        description="High-level Python web framework",
        rationale="Rapid development, batteries included, excellent for data-heavy apps",
        best_practices=[
            "Follow Django/FastAPI conventions",
            "Use virtual environments",
            "Implement proper authentication",
            "Use type hints with FastAPI",
            "Follow PEP 8 style guide",
        ],
        patterns={
            "controller": (
                '@router.post("/users/")\n'
                "async def create_user(user: UserCreate):\n"
                "    db_user = await user_service.create(user)\n"
                "    return db_user"
            ),
            "middleware": "Middleware for auth, CORS, and validation",
            "database": "Django ORM or SQLAlchemy",
        },
        libraries=[
            "fastapi - Modern web framework",
            "sqlalchemy - Database ORM",
            "pydantic - Data validation",
            "uvicorn - ASGI server",
        ],
    ),
    "go": TechnologyMap(
        name="Go",
        description="Compiled language for high-performance services",
        rationale="Excellent concurrency, fast compilation, strong typing",
        best_practices=[
            "Follow Go idioms and conventions",
            "Use goroutines for concurrency",
            "Implement proper error handling",
            "Keep packages focused",
        ],
        patterns={
            "controller": (
                "func CreateUser(w http.ResponseWriter, r *http.Request) {\n"
                "    var user User\n"
                "    json.NewDecoder(r.Body).Decode(&user)\n"
                "    // Process user\n"
                "    json.NewEncoder(w).Encode(user)\n"
                "}"
            ),
            "middleware": "Middleware pattern for HTTP handlers",
            "database": "GORM or sqlx for database access",
        },
        libraries=[
            "gin - Web framework",
            "gorm - ORM library",
            "jwt-go - JWT handling",
        ],
    ),
    "ruby": TechnologyMap(
        name="Ruby on Rails",
        description="Convention over configuration web framework",
        rationale="Rapid development, mature ecosystem, developer happiness",
        best_practices=[
            "Follow Rails conventions",
            "Use ActiveRecord effectively",
            "Implement proper validations",
            "Keep controllers thin",
        ],
        patterns={
            "controller": (
                "def create\n"
                "  @user = User.new(user_params)\n"
                "  if @user.save\n"
                "    render json: @user, status: :created\n"
                "  else\n"
                "    render json: @user.errors, status: :unprocessable_entity\n"
                "  end\n"
                "end"
            ),
            "middleware": "Rails middleware stack",
            "database": "ActiveRecord ORM",
        },
        libraries=[
            "devise - Authentication",
            "sidekiq - Background jobs",
            "rspec - Testing",
        ],
    ),
}


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

DATABASE_MAPS: dict[str, TechnologyMap] = {
    "postgresql": TechnologyMap(
        name="PostgreSQL",
        description="Advanced open-source relational database",
        rationale="ACID compliance, JSON support, powerful features",
        best_practices=[
            "Use proper indexing strategies",
            "Implement database migrations",
            "Use connection pooling",
            "Regular backups and monitoring",
            "Use transactions for data integrity",
        ],
        patterns={
            "schema": "Normalized relational schema with proper constraints",
            "migrations": "Version-controlled database migrations",
            "queries": "Use prepared statements to prevent SQL injection",
        },
        libraries=["pg - PostgreSQL client", "node-postgres - Node.js driver"],
    ),
    "mongodb": TechnologyMap(
        name="MongoDB",
        description="Document-oriented NoSQL database",
        rationale="Flexible schema, horizontal scaling, JSON-like documents",
        best_practices=[
            "Design schema for your queries",
            "Use proper indexing",
            "Implement data validation",
            "Use aggregation pipeline for complex queries",
        ],
        patterns={
            "schema": "Embedded documents and references",
            "migrations": "Schema versioning in application code",
            "queries": "Use MongoDB query language",
        },
        libraries=["mongoose - ODM library", "mongodb - Native driver"],
    ),
    "mysql": TechnologyMap(
        name="MySQL",
        description="Popular open-source relational database",
        rationale="Widespread adoption, good performance, easy to use",
        best_practices=[
            "Use InnoDB storage engine",
            "Implement proper indexing",
            "Use transactions",
            "Regular optimization",
        ],
        patterns={
            "schema": "Normalized relational schema",
            "migrations": "Version-controlled migrations",
            "queries": "Prepared statements",
        },
        libraries=["mysql2 - MySQL client", "sequelize - ORM"],
    ),
    "supabase": TechnologyMap(
        name="Supabase",
        description="Open-source Firebase alternative with PostgreSQL",
        rationale="Built-in auth, real-time, storage, PostgreSQL power",
        best_practices=[
            "Use Row Level Security (RLS)",
            "Leverage real-time subscriptions",
            "Use Edge Functions for backend logic",
            "Implement proper authentication flows",
        ],
        patterns={
            "schema": "PostgreSQL schema with RLS policies",
            "migrations": "Supabase migration system",
            "queries": "Supabase client with TypeScript",
        },
        libraries=[
            "@supabase/supabase-js - Client library",
            "@supabase/auth-helpers - Auth utilities",
        ],
    ),
}


# ---------------------------------------------------------------------------
# Selectable options
# ---------------------------------------------------------------------------

# ``firebase`` is offered as a backend but has no technology map.
FRONTEND_OPTIONS: list[SelectionOption] = [
    SelectionOption(id="react", label="React", icon="⚛️"),
    SelectionOption(id="vue", label="Vue.js", icon="🟢"),
    SelectionOption(id="nextjs", label="Next.js", icon="▲"),
    SelectionOption(id="svelte", label="Svelte", icon="🔥"),
]

BACKEND_OPTIONS: list[SelectionOption] = [
    SelectionOption(id="nodejs", label="Node.js", icon="🟩"),
    SelectionOption(id="python", label="Python", icon="🐍"),
    SelectionOption(id="go", label="Go", icon="🔵"),
    SelectionOption(id="firebase", label="Firebase", icon="🔥"),
]

DATABASE_OPTIONS: list[SelectionOption] = [
    SelectionOption(id="postgresql", label="PostgreSQL", icon="🐘"),
    SelectionOption(id="mongodb", label="MongoDB", icon="🍃"),
    SelectionOption(id="mysql", label="MySQL", icon="🐬"),
    SelectionOption(id="supabase", label="Supabase", icon="⚡"),
]


def get_frontend(key: str) -> Optional[TechnologyMap]:
    return FRONTEND_MAPS.get(key)


def get_backend(key: str) -> Optional[TechnologyMap]:
    return BACKEND_MAPS.get(key)


def get_database(key: str) -> Optional[TechnologyMap]:
    return DATABASE_MAPS.get(key)
