# questions/core_questions.py
# Core question bank: every respondent answers all ten.
# Single-select options award 2 to the role they favour (1 on the softer half
# of a scale, 0 on its neutral point); multi-select options award 1.

QUESTIONS = [
    {
        "id": 1,
        "type": "forced_choice",
        "prompt": "When starting a new project, what is your primary concern?",
        "options": [
            "User experience and visual design",
            "Data structure and system architecture",
            "Testing strategy and quality assurance",
            "Feature requirements and business value",
        ],
        "scoring": [
            {"BE": 0, "FE": 2, "QA": 0, "PM": 0},
            {"BE": 2, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 2, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 2},
        ],
        "option_metadata": [
            {
                "signals": ["User empathy", "Visual thinking", "Design sensibility"],
                "evidence": "You prioritize how users will experience and interact with the product, focusing on intuitive design and visual appeal.",
            },
            {
                "signals": ["System architecture", "Root-cause thinking", "Scalability planning"],
                "evidence": "You think first about how data flows and systems connect, ensuring the foundation can support growth and complexity.",
            },
            {
                "signals": ["Risk spotting", "Quality mindset", "Preventive thinking"],
                "evidence": "You want to catch issues early by planning comprehensive testing, showing a proactive approach to quality.",
            },
            {
                "signals": ["Prioritization under pressure", "Business alignment", "Stakeholder awareness"],
                "evidence": "You focus on what delivers value to users and the business, balancing needs and constraints effectively.",
            },
        ],
    },
    {
        "id": 2,
        "type": "multiple_choice",
        "prompt": "Which of the following tasks do you find most engaging? (Select up to two)",
        "options": [
            "Designing database schemas and optimizing queries",
            "Creating responsive layouts and animations",
            "Writing comprehensive test suites",
            "Gathering user feedback and defining roadmaps",
            "Building RESTful APIs and microservices",
            "Implementing accessibility features",
        ],
        "scoring": [
            {"BE": 1, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 1, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 1, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 1},
            {"BE": 1, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 1, "QA": 0, "PM": 0},
        ],
        "option_metadata": [
            {
                "signals": ["Data modeling", "Performance optimization", "System architecture"],
                "evidence": "You enjoy structuring information efficiently and making systems perform at scale.",
            },
            {
                "signals": ["Visual design", "User experience", "Creative problem-solving"],
                "evidence": "You find satisfaction in creating interfaces that are both beautiful and functional across devices.",
            },
            {
                "signals": ["Quality assurance", "Systematic thinking", "Risk mitigation"],
                "evidence": "You take satisfaction in building comprehensive safety nets that prevent problems before they occur.",
            },
            {
                "signals": ["User empathy", "Strategic planning", "Stakeholder communication"],
                "evidence": "You value understanding user needs and translating them into actionable product plans.",
            },
            {
                "signals": ["API design", "System integration", "Technical architecture"],
                "evidence": "You enjoy building the connective tissue that allows different systems to communicate effectively.",
            },
            {
                "signals": ["Inclusive design", "User empathy", "Attention to detail"],
                "evidence": "You care deeply about ensuring products work for everyone, regardless of ability or device.",
            },
        ],
    },
    {
        "id": 3,
        "type": "likert",
        "prompt": "A release is at risk the day before launch. Where do you naturally step in?",
        "options": [
            "Dig into the failing service and fix the root cause myself",
            "Lean toward fixing it hands-on",
            "Either, depending on the situation",
            "Lean toward re-planning with the people involved",
            "Re-scope the release and coordinate stakeholders",
        ],
        "scoring": [
            {"BE": 2, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 1, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 1},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 2},
        ],
        "option_metadata": [
            {
                "signals": ["Root-cause thinking", "Technical troubleshooting", "Ownership"],
                "evidence": "Under pressure you go straight to the system itself and fix what is actually broken.",
            },
            {
                "signals": ["Technical troubleshooting", "Pragmatic thinking"],
                "evidence": "You prefer to unblock a release by working on the problem directly.",
            },
            {
                "signals": ["Balanced approach", "Flexible approach"],
                "evidence": "You adapt your role in a crisis to whatever the situation needs most.",
            },
            {
                "signals": ["Stakeholder awareness", "Pragmatic thinking"],
                "evidence": "You look for a workable plan that keeps people aligned when things slip.",
            },
            {
                "signals": ["Prioritization under pressure", "Stakeholder management", "Scope control"],
                "evidence": "You protect the launch by making clear scope decisions and keeping everyone informed.",
            },
        ],
    },
    {
        "id": 4,
        "type": "forced_choice",
        "prompt": "If you had to choose one skill to master, which would it be?",
        "options": [
            "System design and scalability",
            "CSS animations and responsive design",
            "Test automation and bug tracking",
            "Stakeholder communication and prioritization",
        ],
        "scoring": [
            {"BE": 2, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 2, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 2, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 2},
        ],
        "option_metadata": [
            {
                "signals": ["System architecture", "Scalability thinking", "Technical depth"],
                "evidence": "You want to master how complex systems work together and handle growth at scale.",
            },
            {
                "signals": ["Visual design", "User experience", "Creative expression"],
                "evidence": "You're drawn to the craft of creating engaging, responsive interfaces that delight users.",
            },
            {
                "signals": ["Quality assurance", "Automation mindset", "Systematic problem-solving"],
                "evidence": "You see value in building robust testing systems that catch issues automatically.",
            },
            {
                "signals": ["Stakeholder management", "Prioritization", "Business alignment"],
                "evidence": "You believe the key to success is understanding needs and aligning teams toward common goals.",
            },
        ],
    },
    {
        "id": 5,
        "type": "likert",
        "prompt": "Which end of a product pulls you in more?",
        "options": [
            "Data, services, and infrastructure",
            "Mostly what happens behind the scenes",
            "Both equally",
            "Mostly what people see and touch",
            "Screens, interactions, and visual polish",
        ],
        "scoring": [
            {"BE": 2, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 1, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 1, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 2, "QA": 0, "PM": 0},
        ],
        "option_metadata": [
            {
                "signals": ["Technical focus", "System-oriented thinking", "Data persistence"],
                "evidence": "You prefer working on the systems and data that everything else depends on.",
            },
            {
                "signals": ["Technical focus", "System-oriented thinking"],
                "evidence": "You lean toward the invisible parts of a product that keep it running.",
            },
            {
                "signals": ["Balanced perspective", "Full-stack curiosity"],
                "evidence": "You're equally comfortable on either side of the stack.",
            },
            {
                "signals": ["User-centered thinking", "Visual thinking"],
                "evidence": "You lean toward the parts of a product that users experience directly.",
            },
            {
                "signals": ["User experience", "Visual design", "Attention to detail"],
                "evidence": "You're energized by crafting the interactions and details users notice first.",
            },
        ],
    },
    {
        "id": 6,
        "type": "forced_choice",
        "prompt": "What type of problem-solving approach do you prefer?",
        "options": [
            "Breaking down complex systems into smaller components",
            "Creating intuitive and visually appealing solutions",
            "Systematically identifying and preventing issues",
            "Balancing multiple constraints and requirements",
        ],
        "scoring": [
            {"BE": 2, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 2, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 2, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 2},
        ],
        "option_metadata": [
            {
                "signals": ["Decomposition", "System thinking", "Analytical approach"],
                "evidence": "You tackle complexity by breaking it into manageable pieces and understanding how they connect.",
            },
            {
                "signals": ["Visual thinking", "User experience", "Creative problem-solving"],
                "evidence": "You solve problems by making them visible, intuitive, and appealing to users.",
            },
            {
                "signals": ["Risk spotting", "Preventive thinking", "Systematic analysis"],
                "evidence": "You approach problems by identifying potential issues before they become real problems.",
            },
            {
                "signals": ["Prioritization", "Stakeholder management", "Balanced decision-making"],
                "evidence": "You excel at weighing competing needs and finding solutions that satisfy multiple constraints.",
            },
        ],
    },
    {
        "id": 7,
        "type": "multiple_choice",
        "prompt": "Which tools or technologies interest you most? (Select up to two)",
        "options": [
            "Docker, Kubernetes, cloud infrastructure",
            "React, Vue, or other frontend frameworks",
            "Selenium, Jest, Cypress testing tools",
            "Jira, Confluence, product analytics",
            "PostgreSQL, Redis, message queues",
            "Figma, design systems, UI libraries",
        ],
        "scoring": [
            {"BE": 1, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 1, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 1, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 1},
            {"BE": 1, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 1, "QA": 0, "PM": 0},
        ],
        "option_metadata": [
            {
                "signals": ["Infrastructure", "DevOps", "System scalability"],
                "evidence": "You're interested in how applications run at scale and how infrastructure supports them.",
            },
            {
                "signals": ["Frontend development", "User interface", "Modern web technologies"],
                "evidence": "You enjoy building interactive user interfaces with modern frameworks and tools.",
            },
            {
                "signals": ["Test automation", "Quality assurance", "Systematic validation"],
                "evidence": "You value tools that help ensure software quality through automated testing.",
            },
            {
                "signals": ["Product management", "Collaboration", "Data-driven decisions"],
                "evidence": "You're drawn to tools that help teams collaborate and make decisions based on data.",
            },
            {
                "signals": ["Data persistence", "System architecture", "Performance optimization"],
                "evidence": "You're interested in how data is stored, retrieved, and processed efficiently.",
            },
            {
                "signals": ["Design systems", "Visual design", "UI consistency"],
                "evidence": "You care about creating cohesive, reusable design patterns that improve user experience.",
            },
        ],
    },
    {
        "id": 8,
        "type": "likert",
        "prompt": "A change you worked on has just been merged. What do you want to do next?",
        "options": [
            "Start building the next capability",
            "Mostly move on, with a quick sanity check",
            "Split my time evenly",
            "Mostly verify it, before moving on",
            "Probe it for edge cases and regressions",
        ],
        "scoring": [
            {"BE": 2, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 1, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 1, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 2, "PM": 0},
        ],
        "option_metadata": [
            {
                "signals": ["Builder mindset", "Technical momentum"],
                "evidence": "You get your energy from constructing the next piece of the system.",
            },
            {
                "signals": ["Builder mindset", "Pragmatic thinking"],
                "evidence": "You trust the process and keep delivery moving after a light check.",
            },
            {
                "signals": ["Balanced approach", "Moderate risk awareness"],
                "evidence": "You weigh building new things and checking existing ones about equally.",
            },
            {
                "signals": ["Quality mindset", "Risk awareness"],
                "evidence": "You like to confirm a change behaves as intended before calling it done.",
            },
            {
                "signals": ["Quality-first mindset", "Risk mitigation", "Systematic validation"],
                "evidence": "You see finding what could break as the most valuable next step after a change lands.",
            },
        ],
    },
    {
        "id": 9,
        "type": "forced_choice",
        "prompt": "What motivates you most in your work?",
        "options": [
            "Building robust and scalable systems",
            "Creating beautiful and functional user interfaces",
            "Ensuring quality and preventing bugs",
            "Delivering value and meeting business goals",
        ],
        "scoring": [
            {"BE": 2, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 2, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 2, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 2},
        ],
        "option_metadata": [
            {
                "signals": ["System architecture", "Scalability", "Technical excellence"],
                "evidence": "You're driven by creating systems that are reliable, performant, and can grow with demand.",
            },
            {
                "signals": ["Visual design", "User experience", "Creative expression"],
                "evidence": "You find motivation in crafting interfaces that are both aesthetically pleasing and highly functional.",
            },
            {
                "signals": ["Quality mindset", "Risk prevention", "Attention to detail"],
                "evidence": "You're motivated by ensuring products work correctly and preventing problems before they impact users.",
            },
            {
                "signals": ["Business impact", "Value delivery", "Stakeholder success"],
                "evidence": "You're driven by seeing your work make a real difference to users and the business.",
            },
        ],
    },
    {
        "id": 10,
        "type": "multiple_choice",
        "prompt": "What activities do you enjoy in your daily work? (Select up to two)",
        "options": [
            "Optimizing database queries and API performance",
            "Prototyping new UI components and interactions",
            "Writing test cases and regression testing",
            "Conducting user interviews and analyzing metrics",
            "Designing API contracts and data models",
            "Ensuring cross-browser compatibility",
        ],
        "scoring": [
            {"BE": 1, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 1, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 1, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 1},
            {"BE": 1, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 1, "QA": 0, "PM": 0},
        ],
        "option_metadata": [
            {
                "signals": ["Performance optimization", "Root-cause thinking", "Technical depth"],
                "evidence": "You enjoy the challenge of making systems faster and more efficient through careful analysis and optimization.",
            },
            {
                "signals": ["Rapid prototyping", "Creative exploration", "User experience"],
                "evidence": "You love experimenting with new interface ideas and seeing how users interact with them.",
            },
            {
                "signals": ["Systematic testing", "Quality assurance", "Preventive thinking"],
                "evidence": "You find satisfaction in building comprehensive test coverage that catches edge cases and regressions.",
            },
            {
                "signals": ["User research", "Data analysis", "User empathy"],
                "evidence": "You enjoy learning directly from users and using data to inform product decisions.",
            },
            {
                "signals": ["API design", "System architecture", "Technical planning"],
                "evidence": "You enjoy designing clean interfaces between systems that are maintainable and extensible.",
            },
            {
                "signals": ["Attention to detail", "Cross-platform thinking", "User experience"],
                "evidence": "You take pride in ensuring products work consistently across different browsers and devices.",
            },
        ],
    },
]

QUESTION_TYPES = ("forced_choice", "multiple_choice", "likert")
SINGLE_SELECT_TYPES = ("forced_choice", "likert")
MAX_MULTI_SELECT = 2
