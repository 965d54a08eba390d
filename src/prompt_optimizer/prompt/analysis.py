"""Request analysis: task type and technology detection.

Patterns cover English and German phrasing; detection is a plain substring
test on the lowercased request.
"""

from __future__ import annotations

GENERAL_TASK = "general"

# Ordered: the first task type with a matching pattern wins
TASK_PATTERNS: list[tuple[str, list[str]]] = [
    (
        "feature-development",
        ["erstelle", "create", "build", "implement", "add", "develop", "baue", "mach"],
    ),
    (
        "debugging",
        ["fix", "debug", "error", "bug", "broken", "failing", "repariere", "fehler"],
    ),
    (
        "refactoring",
        ["refactor", "cleanup", "reorganize", "modernize", "migrate", "umstrukturieren"],
    ),
    ("testing", ["test", "coverage", "tdd", "e2e", "unit test", "integration test"]),
    ("architecture", ["design", "architect", "plan", "structure", "entwerfe", "konzipiere"]),
    (
        "optimization",
        ["optimize", "performance", "speed", "cache", "bundle", "lazy", "optimiere"],
    ),
    ("deployment", ["deploy", "ci/cd", "pipeline", "docker", "kubernetes", "release"]),
    ("documentation", ["document", "docs", "readme", "api docs", "dokumentiere"]),
    ("security-review", ["security", "audit", "vulnerability", "penetration", "sicherheit"]),
    ("data-work", ["data", "pipeline", "etl", "analytics", "dashboard", "report", "daten"]),
]

# Display name -> substrings that reveal the technology
TECHNOLOGY_PATTERNS: dict[str, list[str]] = {
    "Next.js": ["next.js", "nextjs", "next js"],
    "React": ["react"],
    "Vue": ["vue", "vuejs"],
    "Nuxt": ["nuxt"],
    "Angular": ["angular"],
    "Svelte": ["svelte", "sveltekit"],
    "Node.js": ["node.js", "nodejs", "node js"],
    "Express": ["express"],
    "FastAPI": ["fastapi", "fast api"],
    "Django": ["django"],
    "Flask": ["flask"],
    "Spring Boot": ["spring", "springboot", "spring boot"],
    "Hono": ["hono"],
    "TypeScript": ["typescript", "ts"],
    "Python": ["python"],
    "Rust": ["rust"],
    "Go": ["go ", "golang"],
    "Java": ["java "],
    "Ruby": ["ruby", "rails"],
    "PHP": ["php", "laravel"],
    "PostgreSQL": ["postgres", "postgresql"],
    "MySQL": ["mysql"],
    "MongoDB": ["mongodb", "mongo"],
    "Redis": ["redis"],
    "SQLite": ["sqlite"],
    "Supabase": ["supabase"],
    "Firebase": ["firebase"],
    "Prisma": ["prisma"],
    "Drizzle": ["drizzle"],
    "Shopify": ["shopify"],
    "Stripe": ["stripe"],
    "PayPal": ["paypal"],
    "WooCommerce": ["woocommerce"],
    "AWS": ["aws", "amazon web services"],
    "Azure": ["azure"],
    "GCP": ["gcp", "google cloud"],
    "Cloudflare": ["cloudflare", "workers"],
    "Vercel": ["vercel"],
    "Docker": ["docker"],
    "Kubernetes": ["kubernetes", "k8s"],
    "Terraform": ["terraform"],
    "GitHub Actions": ["github actions"],
    "GraphQL": ["graphql"],
    "REST": ["rest api", "restful"],
    "gRPC": ["grpc"],
    "WebSocket": ["websocket"],
    "Tailwind": ["tailwind"],
    "Shadcn/ui": ["shadcn"],
    "Playwright": ["playwright"],
    "Jest": ["jest"],
    "Vitest": ["vitest"],
    "LangChain": ["langchain"],
    "Claude API": ["claude", "anthropic"],
    "OpenAI": ["openai", "gpt"],
    "Flutter": ["flutter"],
    "React Native": ["react native"],
    "Bun": ["bun"],
    "Deno": ["deno"],
    "better-auth": ["better-auth", "better auth"],
    "OAuth": ["oauth", "oauth2"],
    "Drizzle ORM": ["drizzle"],
    "Zod": ["zod"],
}


def detect_task_type(prompt: str) -> str:
    """Return the first task type whose pattern occurs in the prompt."""
    lowered = prompt.lower()
    for task_type, patterns in TASK_PATTERNS:
        if any(pattern in lowered for pattern in patterns):
            return task_type
    return GENERAL_TASK


def detect_technologies(prompt: str) -> list[str]:
    """Return every technology mentioned in the prompt, in table order."""
    lowered = prompt.lower()
    return [
        tech
        for tech, patterns in TECHNOLOGY_PATTERNS.items()
        if any(pattern in lowered for pattern in patterns)
    ]
