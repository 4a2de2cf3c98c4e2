"""Report labels per language tag. Unknown tags fall back to English."""

DEFAULT_LANGUAGE = "en"

LABELS: dict[str, dict[str, str]] = {
    "en": {
        "title": "Career Analysis Report",
        "subtitle": "Complete analysis",
        "summary": "Executive Summary",
        "position": "Position",
        "overall": "Overall Match",
        "ats": "ATS Compatibility",
        "keyword_density": "Keyword Density",
        "experience": "Experience Match",
        "skills_alignment": "Skills Alignment",
        "cover_letter": "Cover Letter",
        "resume": "Resume Optimization",
        "strengths": "Strengths",
        "weaknesses": "Weaknesses",
        "suggestions": "Suggestions",
        "reasoning": "Reasoning",
        "missing_keywords": "Missing Keywords",
        "interview": "Interview Preparation",
        "question": "Question",
        "level": "LEVEL",
        "answer": "Strategic Response",
        "key_points": "Key Points",
        "salary": "Salary Insights",
        "negotiation": "Negotiation Tips",
        "skills": "Skills Analysis",
        "matched": "Matched Skills",
        "gaps": "Skill Gaps",
        "certifications": "Recommended Certifications",
        "learning_path": "Learning Path",
        "action_plan": "Action Plan",
        "immediate": "Immediate",
        "short_term": "Short Term",
        "long_term": "Long Term",
        "market": "Market Analysis",
        "trends": "Industry Trends",
        "positioning": "Competitive Positioning",
        "progression": "Career Progression",
        "risks": "Risk Factors",
        "none": "None",
        "generated_by": "Generated by career-advisor",
    },
    "ko": {
        "title": "커리어 분석 보고서",
        "subtitle": "종합 분석",
        "summary": "요약",
        "position": "포지션",
        "overall": "전체 적합도",
        "ats": "ATS 호환성",
        "keyword_density": "키워드 밀도",
        "experience": "경력 적합도",
        "skills_alignment": "기술 적합도",
        "cover_letter": "자기소개서",
        "resume": "이력서 최적화",
        "strengths": "강점",
        "weaknesses": "약점",
        "suggestions": "개선 제안",
        "reasoning": "근거",
        "missing_keywords": "누락 키워드",
        "interview": "면접 준비",
        "question": "질문",
        "level": "난이도",
        "answer": "모범 답변",
        "key_points": "핵심 포인트",
        "salary": "연봉 정보",
        "negotiation": "협상 팁",
        "skills": "기술 분석",
        "matched": "보유 기술",
        "gaps": "부족한 기술",
        "certifications": "추천 자격증",
        "learning_path": "학습 경로",
        "action_plan": "실행 계획",
        "immediate": "즉시",
        "short_term": "단기",
        "long_term": "장기",
        "market": "시장 분석",
        "trends": "산업 동향",
        "positioning": "경쟁력",
        "progression": "커리어 경로",
        "risks": "리스크 요인",
        "none": "없음",
        "generated_by": "career-advisor 생성",
    },
}


def get_labels(language: str | None) -> dict[str, str]:
    tag = (language or DEFAULT_LANGUAGE).lower().split("-")[0]
    return LABELS.get(tag, LABELS[DEFAULT_LANGUAGE])
