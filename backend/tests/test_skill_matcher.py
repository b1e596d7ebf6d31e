from services.skill_matcher import match_categories, match_skills, mentioned_skills

SKILLS = ("Python", "SQL", "Docker", "Kubernetes")


def test_mentioned_skills_keeps_taxonomy_order():
    assert mentioned_skills("docker then python", SKILLS) == ["Python", "Docker"]


def test_match_skills_partial():
    result = match_skills("Python and Docker", "Python, SQL, Docker, Kubernetes", SKILLS)
    assert result.present == 2
    assert result.total == 4
    assert result.percent == 50
    assert result.present_skills == ["Python", "Docker"]
    assert result.missing_skills == ["SQL", "Kubernetes"]


def test_match_skills_only_counts_required():
    # Kubernetes is on the resume but the job does not ask for it
    result = match_skills("Python Kubernetes", "Python", SKILLS)
    assert result.present_skills == ["Python"]
    assert result.total == 1
    assert result.percent == 100


def test_match_skills_rounds_half_up():
    skills = ("A1", "B2", "C3", "D4", "E5", "F6", "G7", "H8")
    # 1 of 8 = 12.5%
    result = match_skills("a1", " ".join(skills), skills)
    assert result.percent == 13


def test_match_skills_no_requirements_is_vacuously_complete():
    result = match_skills("Python", "We value punctuality", SKILLS)
    assert result.percent == 100
    assert result.present == 0
    assert result.total == len(SKILLS)
    assert result.missing_skills == []


def test_match_skills_empty_resume():
    result = match_skills("", "Docker", SKILLS)
    assert result.percent == 0
    assert result.missing_skills == ["Docker"]
    assert result.present_skills == []


def test_match_skills_substring_semantics():
    # Plain substring matching: PostgreSQL on a resume satisfies SQL
    result = match_skills("PostgreSQL", "SQL", SKILLS)
    assert result.present_skills == ["SQL"]


def test_match_categories(sample_resume, sample_jd, taxonomy):
    hard, soft = match_categories(sample_resume, sample_jd, taxonomy)
    assert hard.present_skills == ["Python", "SQL", "Docker"]
    assert hard.missing_skills == ["Kubernetes"]
    assert hard.percent == 75
    assert soft.present_skills == ["Communication", "Leadership"]
    assert soft.missing_skills == []
    assert soft.percent == 100
