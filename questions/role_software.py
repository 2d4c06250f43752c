# questions/role_software.py
# Tools each role should start learning (learn_first) and grow into
# (next_steps). Shown on the result page next to the playbooks.
from questions.roles import split_role_string

ROLE_SOFTWARE = {
    "BE": {
        "learn_first": [
            "Git (v2.40 or higher): version control for source code management",
            "Node.js (v20.19.0 or higher): JavaScript runtime used by the frontend build tooling",
            "pnpm (v9.0.0 or higher): package manager for installing frontend and backend libraries",
            "PHP (v8.2 or higher): server-side runtime used by the Laravel backend API",
            "Composer (v2.x): PHP dependency manager for Laravel and backend packages",
            "SQL Server (v16.x or v17.x): primary database engine for application data",
            "Redis (v7.x): in-memory data store for caching, queues, and sessions",
        ],
        "next_steps": [
            "Laravel 12.x: backend web framework (installed via Composer)",
            "TypeScript 5.9.x: typed JavaScript for safer backend and tooling code",
            "Vite 7.3.x: build tool used in the frontend stack",
            "Required PHP extensions (redis, openssl, mbstring, tokenizer, xml, ctype, json, bcmath)",
            "Performance tuning and monitoring for SQL Server and Redis",
        ],
    },
    "FE": {
        "learn_first": [
            "Git (v2.40 or higher): version control for source code and branching",
            "Node.js (v20.19.0 or higher): runtime for Vue build tools and the dev server",
            "pnpm (v9.0.0 or higher): package manager for the frontend monorepo",
            "Visual Studio Code: main IDE with Vue/TypeScript support",
            "Vue.js 3.5.x: core frontend framework",
            "TypeScript 5.9.x: typed JavaScript for the Vue codebase",
            "Vite 7.3.x: dev server and bundler for the frontend",
            "Tailwind CSS 4.1.x: utility-first CSS framework used for styling",
            "Nuxt UI 4.3.x: UI component library for the Vue/Nuxt stack",
        ],
        "next_steps": [
            "VS Code: Vue - Official extension for Vue 3 language support",
            "VS Code: ESLint extension for JavaScript/TypeScript linting",
            "VS Code: Tailwind CSS IntelliSense for utility class autocomplete",
            "VS Code: Prettier for consistent formatting",
            "Postman or Insomnia: API client for exercising backend endpoints from the UI",
        ],
    },
    "QA": {
        "learn_first": [
            "Git (v2.40 or higher): pull branches, review changes, and reproduce issues",
            "Postman or Insomnia: API testing for backend REST endpoints",
            "SQL Server (v16.x or v17.x): inspect and validate application data",
            "Redis (v7.x): understand cache and state behavior when debugging",
            "Visual Studio Code: read tests, logs, and configuration",
        ],
        "next_steps": [
            "Basic Node.js and pnpm usage to run test suites or dev servers locally",
            "Basic PHP and Laravel concepts to understand backend routes and behavior",
            "Vue.js and TypeScript basics to reason about frontend logic when investigating defects",
            "ESLint and Prettier in VS Code to keep small QA-side changes consistent",
            "Laravel 12.x, Vue 3.5.x, and Tailwind CSS 4.1.x as the core app stack",
        ],
    },
    "PM": {
        "learn_first": [
            "Visual Studio Code: read configuration, environment docs, and simple code references",
            "Postman or Insomnia: explore key API endpoints and data shapes",
            "High-level familiarity with Git and how branches and releases are managed",
            "High-level familiarity with Node.js, PHP/Laravel, and Vue to speak the team's language",
        ],
        "next_steps": [
            "Basic SQL Server querying to understand core tables and data models",
            "Basic Redis concepts: caches, queues, and how they affect user experience",
            "Framework-level docs (Laravel 12.x, Vue 3.5.x, Nuxt UI, Tailwind CSS) for capabilities and constraints",
            "Installation order and system requirements, to plan realistic timelines with IT/Sec",
        ],
    },
}


def get_role_software(role_id):
    return ROLE_SOFTWARE.get(role_id)


def get_role_software_by_string(role_string):
    """'BE' or 'BE + FE' -> software for the first role, or None."""
    roles = split_role_string(role_string)
    if not roles:
        return None
    return ROLE_SOFTWARE.get(roles[0])
