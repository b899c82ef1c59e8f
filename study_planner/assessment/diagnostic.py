"""Diagnostic quiz used to find a student's weak topics."""

from __future__ import annotations

from study_planner.schemas.assessment import QuizQuestion, TopicMastery

QUIZ_QUESTIONS: list[QuizQuestion] = [
    QuizQuestion(
        id=1,
        question="Which of the following is NOT a fundamental principle of information security (CIA Triad)?",
        options=["Confidentiality", "Integrity", "Availability", "Authorization"],
        correct_answer="Authorization",
        topic="Security Fundamentals",
    ),
    QuizQuestion(
        id=2,
        question="In networking, which protocol is responsible for translating domain names to IP addresses?",
        options=["HTTP", "FTP", "DNS", "TCP"],
        correct_answer="DNS",
        topic="Networking",
    ),
    QuizQuestion(
        id=3,
        question="What is the primary purpose of a Docker container?",
        options=[
            "To run a full-fledged operating system",
            "To package an application with its dependencies",
            "To manage virtual machines",
            "To provide physical server hardware",
        ],
        correct_answer="To package an application with its dependencies",
        topic="DevOps & Containers",
    ),
    QuizQuestion(
        id=4,
        question="Which cloud computing model provides virtualized computing resources over the internet?",
        options=["SaaS", "PaaS", "IaaS", "FaaS"],
        correct_answer="IaaS",
        topic="Cloud Computing",
    ),
    QuizQuestion(
        id=5,
        question="What does SQL stand for?",
        options=[
            "Structured Question Language",
            "Strong Query Language",
            "Structured Query Language",
            "Simple Query Language",
        ],
        correct_answer="Structured Query Language",
        topic="Databases",
    ),
]


def weak_topics_from_answers(
    answers: dict[int, str], questions: list[QuizQuestion] | None = None
) -> list[str]:
    """Topics of wrongly answered questions, unique and in question order.

    Unanswered questions do not make a topic weak.
    """
    questions = QUIZ_QUESTIONS if questions is None else questions
    weak = [
        q.topic
        for q in questions
        if answers.get(q.id) and answers[q.id] != q.correct_answer
    ]
    return list(dict.fromkeys(weak))


def topic_mastery(
    answers: dict[int, str], questions: list[QuizQuestion] | None = None
) -> list[TopicMastery]:
    """Percentage of correctly answered questions per topic."""
    questions = QUIZ_QUESTIONS if questions is None else questions
    totals: dict[str, list[int]] = {}
    for q in questions:
        correct_total = totals.setdefault(q.topic, [0, 0])
        correct_total[1] += 1
        if answers.get(q.id) == q.correct_answer:
            correct_total[0] += 1
    return [
        TopicMastery(topic=topic, mastery=correct / total * 100)
        for topic, (correct, total) in totals.items()
    ]
