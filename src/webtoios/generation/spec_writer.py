"""iOS migration document generator.

:func:`render_migration_spec` is a pure function of a project model and the
caller's options: every section is computed independently and the sections
are joined with a blank line. The only non-deterministic input is the
generation timestamp, which callers may pin.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from webtoios.detection.models import CraProject, NextJsProject, RouterType, ViteProject

if TYPE_CHECKING:
    from webtoios.detection.models import GenerateSpecOptions, ProjectModel

FENCE = "```"

STATIC_EXPORT_WARNING = "⚠️ **CRITICAL**: You must enable static export for Capacitor."
API_ROUTES_WARNING = "⚠️ **API Routes Detected**: API routes don't work with static export."


def _code(language: str, *body: str) -> str:
    return "\n".join([f"{FENCE}{language}", *body, FENCE])


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def render_header(app_name: str, project: ProjectModel, generated_at: datetime) -> str:
    return "\n".join(
        [
            f"# iOS Migration Specification: {app_name}",
            "",
            f"Generated: {generated_at.isoformat()}",
            f"Framework: {project.framework.value.upper()}",
            f"Version: {project.version}",
            "",
            "---",
        ]
    )


def render_overview(project: ProjectModel) -> str:
    lines = [
        "## Project Overview",
        "",
        f"- **Framework**: {project.framework.value}",
        f"- **Version**: {project.version}",
        f"- **Build Command**: `{project.build_command}`",
        f"- **Build Output**: `{project.build_output_dir}`",
    ]

    if isinstance(project, ViteProject):
        lines.append(f"- **UI Library**: {project.ui_library.value}")
        lines.append(f"- **React Router**: {_yes_no(project.has_react_router)}")
        lines.append(f"- **Vue Router**: {_yes_no(project.has_vue_router)}")
    elif isinstance(project, NextJsProject):
        router = {
            RouterType.APP: "App Router",
            RouterType.PAGES: "Pages Router",
            RouterType.UNKNOWN: "Unknown",
        }[project.router_type]
        api = "Yes (⚠️ Requires backend setup)" if project.has_api_routes else "No"
        static = "Yes ✓" if project.is_static_export else "No (⚠️ Required for Capacitor)"
        lines.append(f"- **Router Type**: {router}")
        lines.append(f"- **API Routes**: {api}")
        lines.append(f"- **Static Export**: {static}")
    elif isinstance(project, CraProject):
        lines.append(f"- **React Router**: {_yes_no(project.has_react_router)}")

    return "\n".join(lines)


def render_capacitor_setup(project: ProjectModel, app_name: str, bundle_id: str) -> str:
    return "\n".join(
        [
            "## Capacitor Setup",
            "",
            "### 1. Install Capacitor",
            "",
            _code("bash", "npm install @capacitor/core @capacitor/cli", "npm install @capacitor/ios"),
            "",
            "### 2. Initialize Capacitor",
            "",
            _code(
                "bash",
                f'npx cap init "{app_name}" "{bundle_id}" '
                f'--web-dir="{project.build_output_dir}"',
            ),
            "",
            "### 3. Add iOS Platform",
            "",
            _code("bash", "npx cap add ios"),
        ]
    )


# ---------------------------------------------------------------------------
# Framework-specific guidance
# ---------------------------------------------------------------------------


def _nextjs_steps(project: NextJsProject) -> str:
    parts = ["## Next.js Specific Configuration", "### 1. Enable Static Export"]

    if project.is_static_export:
        parts.append("✓ Static export is already enabled.")
    else:
        parts.append(STATIC_EXPORT_WARNING)
        parts.append("Edit `next.config.js`:")
        parts.append(
            _code(
                "javascript",
                "/** @type {import('next').NextConfig} */",
                "const nextConfig = {",
                "  output: 'export',",
                "  images: {",
                "    unoptimized: true, // Required for static export",
                "  },",
                "};",
                "",
                "module.exports = nextConfig;",
            )
        )

    parts.append("### 2. Handle Dynamic Features")
    if project.has_api_routes:
        parts.append(
            "\n".join(
                [
                    API_ROUTES_WARNING,
                    "Options:",
                    "- Move API logic to external backend (Supabase, Firebase, etc.)",
                    "- Use serverless functions (Vercel, Netlify)",
                    "- Create separate backend service",
                ]
            )
        )
    else:
        parts.append("✓ No API routes detected.")

    if project.router_type is RouterType.APP:
        parts.append("### 3. App Router Considerations")
        parts.append(
            "\n".join(
                [
                    "- Remove server components that use `fetch` at build time",
                    "- Convert `generateStaticParams` for all dynamic routes",
                    "- Use `getStaticProps` pattern with static data",
                ]
            )
        )
    elif project.router_type is RouterType.PAGES:
        parts.append("### 3. Pages Router Considerations")
        parts.append(
            "\n".join(
                [
                    "- Replace `getServerSideProps` with `getStaticProps`",
                    "- Ensure all dynamic routes have `getStaticPaths`",
                    "- Remove API routes or move to external service",
                ]
            )
        )

    return "\n\n".join(parts)


_REACT_ROUTER_SNIPPET = (
    "import { BrowserRouter } from 'react-router-dom';",
    "",
    "<BrowserRouter>",
    "  <App />",
    "</BrowserRouter>",
)


def _vite_steps(project: ViteProject) -> str:
    extension = "ts"
    if project.config_file_path:
        extension = project.config_file_path.rsplit(".", 1)[-1]

    parts = [
        "## Vite Specific Configuration",
        "### 1. Base Path Configuration",
        f"Update `vite.config.{extension}`:",
        _code(
            "typescript",
            "export default defineConfig({",
            "  base: './', // Important for mobile",
            "  build: {",
            f"    outDir: '{project.build_output_dir}',",
            "  },",
            "});",
        ),
        "### 2. Environment Variables",
        "\n".join(
            [
                "Vite uses `import.meta.env`:",
                "- Prefix with `VITE_` for client-side variables",
                "- Create `.env.production` for production builds",
            ]
        ),
    ]

    routers: list[str] = []
    if project.has_react_router:
        routers.append(
            "**React Router detected**:\n"
            + _code(
                "typescript",
                _REACT_ROUTER_SNIPPET[0],
                "",
                "// Use BrowserRouter (hash routing not needed for Capacitor)",
                *_REACT_ROUTER_SNIPPET[2:],
            )
        )
    if project.has_vue_router:
        routers.append(
            "**Vue Router detected**:\n"
            + _code(
                "typescript",
                "import { createRouter, createWebHistory } from 'vue-router';",
                "",
                "const router = createRouter({",
                "  history: createWebHistory(), // Use web history",
                "  routes,",
                "});",
            )
        )
    if routers:
        parts.append("### 3. Router Configuration")
        parts.extend(routers)

    return "\n\n".join(parts)


def _cra_steps(project: CraProject) -> str:
    parts = [
        "## Create React App Configuration",
        "### 1. Environment Variables",
        "- Use `REACT_APP_` prefix for client-side variables\n"
        "- Create `.env.production` for production",
        "### 2. Homepage Configuration",
        "Update `package.json`:",
        _code("json", "{", '  "homepage": "."', "}"),
    ]
    if project.has_react_router:
        parts.append("### 3. Router Configuration")
        parts.append(_code("typescript", *_REACT_ROUTER_SNIPPET))
    return "\n\n".join(parts)


def render_framework_steps(project: ProjectModel) -> str:
    if isinstance(project, NextJsProject):
        return _nextjs_steps(project)
    if isinstance(project, ViteProject):
        return _vite_steps(project)
    return _cra_steps(project)


# ---------------------------------------------------------------------------
# Static sections
# ---------------------------------------------------------------------------


COMMON_ISSUES = "\n".join(
    [
        "## Common Issues & Solutions",
        "",
        "### 1. CORS and API Calls",
        "",
        "⚠️ Mobile apps don't have CORS restrictions, but:",
        "- Use absolute URLs for API calls",
        "- Configure proper authentication headers",
        "- Test with actual backend endpoints",
        "",
        "### 2. Local Storage & Cookies",
        "",
        "✓ Works normally in Capacitor",
        "- Consider using Capacitor Storage for sensitive data",
        "- `@capacitor/preferences` for persistent storage",
        "",
        "### 3. File Access & Camera",
        "",
        "Add Capacitor plugins as needed:",
        "",
        _code("bash", "npm install @capacitor/camera @capacitor/filesystem"),
        "",
        "### 4. Deep Linking",
        "",
        "Configure URL schemes in `capacitor.config.ts`:",
        "",
        _code("typescript", "{", "  server: {", "    androidScheme: 'https'", "  }", "}"),
        "",
        "### 5. Safe Area & Notch",
        "",
        "Add viewport meta tag and CSS:",
        "",
        _code(
            "css",
            "body {",
            "  padding: env(safe-area-inset-top) env(safe-area-inset-right)",
            "          env(safe-area-inset-bottom) env(safe-area-inset-left);",
            "}",
        ),
    ]
)

TESTING_CHECKLIST = "\n".join(
    [
        "## Testing Checklist",
        "",
        "- [ ] App launches without crashes",
        "- [ ] Navigation works correctly",
        "- [ ] API calls succeed",
        "- [ ] Authentication flows work",
        "- [ ] Local storage persists",
        "- [ ] Images and assets load",
        "- [ ] Forms submit properly",
        "- [ ] Responsive layout on different screen sizes",
        "- [ ] Status bar and safe area handled",
        "- [ ] Back button behavior correct",
    ]
)


def render_build_steps(project: ProjectModel) -> str:
    return "\n".join(
        [
            "## Build & Deploy Steps",
            "",
            "### 1. Build Web Assets",
            "",
            _code("bash", project.build_command),
            "",
            "### 2. Sync with Capacitor",
            "",
            _code("bash", "npx cap sync ios"),
            "",
            "### 3. Open in Xcode",
            "",
            _code("bash", "npx cap open ios"),
            "",
            "### 4. Configure in Xcode",
            "",
            "- Set development team (Signing & Capabilities)",
            "- Configure app icons and splash screens",
            "- Set deployment target (iOS 13.0+)",
            "- Add required permissions to Info.plist",
            "",
            "### 5. Build & Run",
            "",
            "- Select device/simulator",
            "- Click Run (⌘R) or Build (⌘B)",
        ]
    )


def render_next_steps(primary_color: str | None) -> str:
    color_clause = f" (use {primary_color} as primary color)" if primary_color else ""
    return "\n".join(
        [
            "## Next Steps",
            "",
            "1. **App Icon & Splash Screen**",
            "   - Use `@capacitor/assets` for generation",
            f"   - Prepare 1024x1024 icon{color_clause}",
            "",
            "2. **App Store Preparation**",
            "   - Create App Store Connect listing",
            '   - Prepare screenshots (6.5", 5.5")',
            "   - Write app description and keywords",
            "",
            "3. **Testing**",
            "   - Test on physical device",
            "   - Submit to TestFlight for beta testing",
            "",
            "4. **Performance Optimization**",
            "   - Minimize bundle size",
            "   - Optimize images",
            "   - Enable code splitting",
            "",
            "---",
            "",
            "**Generated by web-to-ios**",
        ]
    )


def render_migration_spec(
    project: ProjectModel,
    options: GenerateSpecOptions,
    *,
    generated_at: datetime | None = None,
) -> str:
    """Render the full iOS migration document for *project*."""
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)

    sections = [
        render_header(options.app_name, project, generated_at),
        render_overview(project),
        render_capacitor_setup(project, options.app_name, options.bundle_id),
        render_framework_steps(project),
        COMMON_ISSUES,
        render_build_steps(project),
        TESTING_CHECKLIST,
        render_next_steps(options.primary_color),
    ]
    return "\n\n".join(sections)
