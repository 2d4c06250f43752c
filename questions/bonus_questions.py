# questions/bonus_questions.py
# Tie-breaker questions shown after the core bank. Ids start at 101 so they
# never collide with core ids; "pair" names the two roles a question separates.

BONUS_QUESTIONS = [
    {
        "id": 101,
        "pair": "BE-FE",
        "type": "forced_choice",
        "prompt": "A page is loading slowly. Which fix would you reach for first?",
        "options": [
            "Profile the API and speed up the slow query",
            "Show a skeleton screen and load content progressively",
        ],
        "scoring": [
            {"BE": 2, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 2, "QA": 0, "PM": 0},
        ],
        "option_metadata": [
            {
                "signals": ["Performance optimization", "Root-cause thinking"],
                "evidence": "You look for the source of slowness in the systems behind the page.",
            },
            {
                "signals": ["User experience", "Perceived performance"],
                "evidence": "You improve how fast the product feels for the person using it.",
            },
        ],
    },
    {
        "id": 102,
        "pair": "BE-FE",
        "type": "likert",
        "prompt": "Given a free week, what would you rather build?",
        "options": [
            "A new internal service",
            "Probably a service",
            "No preference",
            "Probably an interface",
            "A polished new interface",
        ],
        "scoring": [
            {"BE": 2, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 1, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 1, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 2, "QA": 0, "PM": 0},
        ],
        "option_metadata": [
            {"signals": ["System architecture", "Technical depth"], "evidence": "Given free rein, you build the systems other work depends on."},
            {"signals": ["Technical focus"], "evidence": "You lean toward backend work when the choice is yours."},
            {"signals": ["Full-stack curiosity"], "evidence": "You're happy building on either side of the stack."},
            {"signals": ["User interface"], "evidence": "You lean toward building things people see."},
            {"signals": ["Visual design", "User experience"], "evidence": "Given free rein, you craft experiences users will enjoy."},
        ],
    },
    {
        "id": 103,
        "pair": "BE-QA",
        "type": "forced_choice",
        "prompt": "A bug slipped into production. What do you want to own?",
        "options": [
            "The fix in the code that caused it",
            "The test that would have caught it",
        ],
        "scoring": [
            {"BE": 2, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 2, "PM": 0},
        ],
        "option_metadata": [
            {"signals": ["Root-cause thinking", "Ownership"], "evidence": "You want to repair the underlying logic so the bug cannot recur."},
            {"signals": ["Preventive thinking", "Test automation"], "evidence": "You want a safety net that stops this class of bug from shipping again."},
        ],
    },
    {
        "id": 104,
        "pair": "BE-QA",
        "type": "likert",
        "prompt": "Which feels more satisfying?",
        "options": [
            "Shipping a new endpoint",
            "Mostly shipping",
            "Both equally",
            "Mostly verifying",
            "Proving an endpoint handles every edge case",
        ],
        "scoring": [
            {"BE": 2, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 1, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 1, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 2, "PM": 0},
        ],
        "option_metadata": [
            {"signals": ["Builder mindset", "API design"], "evidence": "You're satisfied by adding working capability to a system."},
            {"signals": ["Builder mindset"], "evidence": "You lean toward building over checking."},
            {"signals": ["Balanced approach"], "evidence": "You value building and verifying about equally."},
            {"signals": ["Quality mindset"], "evidence": "You lean toward confirming things work."},
            {"signals": ["Systematic validation", "Risk mitigation"], "evidence": "You're satisfied by knowing a system holds up under every condition."},
        ],
    },
    {
        "id": 105,
        "pair": "BE-PM",
        "type": "forced_choice",
        "prompt": "Two teams need conflicting changes to the same service. What do you do?",
        "options": [
            "Design an architecture that supports both",
            "Work out with both teams which change matters more",
        ],
        "scoring": [
            {"BE": 2, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 2},
        ],
        "option_metadata": [
            {"signals": ["System architecture", "Technical planning"], "evidence": "You resolve conflicts by finding a technical design that serves everyone."},
            {"signals": ["Prioritization", "Stakeholder management"], "evidence": "You resolve conflicts by aligning people on what matters most."},
        ],
    },
    {
        "id": 106,
        "pair": "BE-PM",
        "type": "likert",
        "prompt": "Where would you rather spend your meeting-free afternoon?",
        "options": [
            "Deep in the codebase",
            "Mostly in code",
            "A bit of both",
            "Mostly planning",
            "Shaping next quarter's roadmap",
        ],
        "scoring": [
            {"BE": 2, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 1, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 1},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 2},
        ],
        "option_metadata": [
            {"signals": ["Technical depth", "Focus"], "evidence": "You use uninterrupted time for deep technical work."},
            {"signals": ["Technical focus"], "evidence": "You lean toward hands-on technical work."},
            {"signals": ["Balanced perspective"], "evidence": "You split your attention between building and planning."},
            {"signals": ["Strategic planning"], "evidence": "You lean toward planning the work ahead."},
            {"signals": ["Strategic planning", "Business alignment"], "evidence": "You use uninterrupted time to decide where the product should go."},
        ],
    },
    {
        "id": 107,
        "pair": "FE-QA",
        "type": "forced_choice",
        "prompt": "A new form is ready for review. What do you check first?",
        "options": [
            "Whether it looks right and feels smooth to fill in",
            "Whether every invalid input is rejected correctly",
        ],
        "scoring": [
            {"BE": 0, "FE": 2, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 2, "PM": 0},
        ],
        "option_metadata": [
            {"signals": ["User experience", "Visual design"], "evidence": "You judge a feature first by how it feels to use."},
            {"signals": ["Systematic validation", "Risk spotting"], "evidence": "You judge a feature first by whether it behaves correctly at its edges."},
        ],
    },
    {
        "id": 108,
        "pair": "FE-QA",
        "type": "likert",
        "prompt": "Which compliment would mean more to you?",
        "options": [
            "\"This is a joy to use\"",
            "Mostly the first",
            "Both equally",
            "Mostly the second",
            "\"This never breaks\"",
        ],
        "scoring": [
            {"BE": 0, "FE": 2, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 1, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 1, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 2, "PM": 0},
        ],
        "option_metadata": [
            {"signals": ["User empathy", "Design sensibility"], "evidence": "You measure success by how people feel using what you made."},
            {"signals": ["User empathy"], "evidence": "You lean toward delight as the mark of good work."},
            {"signals": ["Balanced approach"], "evidence": "You value delight and reliability about equally."},
            {"signals": ["Quality mindset"], "evidence": "You lean toward reliability as the mark of good work."},
            {"signals": ["Quality-first mindset", "Reliability"], "evidence": "You measure success by how dependable your work is."},
        ],
    },
    {
        "id": 109,
        "pair": "FE-PM",
        "type": "forced_choice",
        "prompt": "Users are confused by a new feature. What is your instinct?",
        "options": [
            "Redesign the screen so the flow is obvious",
            "Revisit whether the feature solves the right problem",
        ],
        "scoring": [
            {"BE": 0, "FE": 2, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 2},
        ],
        "option_metadata": [
            {"signals": ["Interaction design", "User experience"], "evidence": "You fix confusion by making the interface itself clearer."},
            {"signals": ["Product thinking", "User research"], "evidence": "You fix confusion by questioning what the feature is for."},
        ],
    },
    {
        "id": 110,
        "pair": "FE-PM",
        "type": "likert",
        "prompt": "In a feature kickoff, where do you add the most value?",
        "options": [
            "Sketching what the user will see",
            "Mostly sketching",
            "Both equally",
            "Mostly defining",
            "Defining scope and success metrics",
        ],
        "scoring": [
            {"BE": 0, "FE": 2, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 1, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 1},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 2},
        ],
        "option_metadata": [
            {"signals": ["Rapid prototyping", "Visual thinking"], "evidence": "You make ideas concrete by showing what they will look like."},
            {"signals": ["Visual thinking"], "evidence": "You lean toward shaping the experience early."},
            {"signals": ["Balanced perspective"], "evidence": "You contribute to both the experience and the plan."},
            {"signals": ["Strategic planning"], "evidence": "You lean toward defining what the feature must achieve."},
            {"signals": ["Scope control", "Data-driven decisions"], "evidence": "You make ideas concrete by defining scope and how success is measured."},
        ],
    },
    {
        "id": 111,
        "pair": "PM-QA",
        "type": "forced_choice",
        "prompt": "A release is ready but a minor bug is still open. What do you push for?",
        "options": [
            "Ship now and schedule the fix for the next release",
            "Hold the release until the bug is verified fixed",
        ],
        "scoring": [
            {"BE": 0, "FE": 0, "QA": 0, "PM": 2},
            {"BE": 0, "FE": 0, "QA": 2, "PM": 0},
        ],
        "option_metadata": [
            {"signals": ["Prioritization under pressure", "Value delivery"], "evidence": "You weigh risk against the value of getting the release out."},
            {"signals": ["Quality-first mindset", "Risk mitigation"], "evidence": "You protect users from known defects even at the cost of a delay."},
        ],
    },
    {
        "id": 112,
        "pair": "PM-QA",
        "type": "likert",
        "prompt": "Which document would you rather write?",
        "options": [
            "A product requirements document",
            "Probably the requirements",
            "No preference",
            "Probably the test plan",
            "A detailed test plan",
        ],
        "scoring": [
            {"BE": 0, "FE": 0, "QA": 0, "PM": 2},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 1},
            {"BE": 0, "FE": 0, "QA": 0, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 1, "PM": 0},
            {"BE": 0, "FE": 0, "QA": 2, "PM": 0},
        ],
        "option_metadata": [
            {"signals": ["Product thinking", "Stakeholder communication"], "evidence": "You like capturing what a product must do and why."},
            {"signals": ["Product thinking"], "evidence": "You lean toward defining requirements."},
            {"signals": ["Flexible approach"], "evidence": "You're comfortable writing either kind of document."},
            {"signals": ["Quality mindset"], "evidence": "You lean toward defining how work is verified."},
            {"signals": ["Systematic validation", "Attention to detail"], "evidence": "You like capturing exactly how a product will be proven to work."},
        ],
    },
]
