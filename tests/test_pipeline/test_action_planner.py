"""Tests for the three-phase action plan."""

from career_advisor.models import CompatibilityScores, SkillsAnalysis
from career_advisor.pipeline.action_planner import plan_actions


def _scores(ats=90, keyword_density=90):
    return CompatibilityScores(
        ats=ats,
        keyword_density=keyword_density,
        experience_alignment=100,
        skills_match=100,
        overall=90,
    )


class TestPlanActions:
    def test_strong_candidate(self):
        plan = plan_actions(SkillsAnalysis(), _scores())
        assert len(plan.immediate) == 2
        assert plan.immediate[0].priority == "high"
        assert plan.immediate[0].task.startswith("Polish resume")
        assert plan.immediate[1].priority == "critical"
        assert [item.task for item in plan.short_term] == [
            "Prepare interview strategy and practice with the STAR method"
        ]
        assert len(plan.long_term) == 2
        assert plan.long_term[1].priority == "low"

    def test_low_ats_marks_resume_critical(self):
        plan = plan_actions(SkillsAnalysis(), _scores(ats=60))
        assert plan.immediate[0].priority == "critical"

    def test_many_gaps(self):
        skills = SkillsAnalysis(
            missing_skills=["Go", "Rust", "Kafka", "Spark"], match_percentage=0
        )
        plan = plan_actions(skills, _scores(keyword_density=40))

        assert len(plan.immediate) == 3
        assert plan.immediate[0].priority == "critical"
        assert "Add 4 missing keywords (Go, Rust, Kafka)" in plan.immediate[0].task
        assert plan.immediate[2].success_metrics == ["Keyword density > 75%"]

        assert plan.short_term[0].task.startswith("Develop 4 missing skills")
        assert plan.short_term[0].timeframe == "1-3 months"

        assert len(plan.long_term) == 3
        assert plan.long_term[0].task.startswith("Close the remaining")
        assert plan.long_term[2].priority == "medium"

    def test_few_gaps_shorter_timeframe(self):
        skills = SkillsAnalysis(missing_skills=["Go"], match_percentage=50)
        plan = plan_actions(skills, _scores())
        assert plan.short_term[0].timeframe == "2-8 weeks"
        assert len(plan.long_term) == 2
