from resumekit.matching.scoring import JDMatcher, jd_matcher


def test_direct_and_semantic_matches(sample_record):
    jd = "We need Python, Docker and Kubernetes experience with RESTful services on the cloud."
    result = jd_matcher.match(sample_record, jd)

    assert result.matched_skills == ["python", "docker", "kubernetes", "restful", "cloud"]
    assert result.missing_skills == []
    assert result.match_score == 100
    semantic = {m.jd_term: m.resume_term for m in result.semantic_matches}
    assert semantic == {"restful": "rest", "cloud": "aws"}
    assert result.suggestions == []


def test_missing_skills_and_suggestion(sample_record):
    result = jd_matcher.match(sample_record, "Looking for GraphQL, Redis and Python")

    assert result.matched_skills == ["python"]
    assert result.missing_skills == ["graphql", "redis"]
    assert result.match_score == 33
    assert result.role_alignment == 33
    assert result.suggestions == ["Consider adding: graphql, redis"]


def test_suggestion_lists_at_most_three(sample_record):
    result = jd_matcher.match(sample_record, "GraphQL, Redis, TensorFlow, PyTorch, Elasticsearch")
    assert result.suggestions == ["Consider adding: graphql, redis, tensorflow"]


def test_no_whole_word_false_positives(sample_record):
    result = jd_matcher.match(sample_record, "Strong JavaScript skills")
    assert result.missing_skills == ["javascript"]


def test_empty_inputs(sample_record):
    result = jd_matcher.match(sample_record, "  ", "")
    assert result.match_score == 0
    assert result.matched_skills == []
    assert result.suggestions == []


def test_target_role_alignment(sample_record):
    aligned = jd_matcher.match(sample_record, "", "Backend Engineer")
    assert aligned.role_alignment == 100
    assert aligned.suggestions == []

    partial = JDMatcher().match(sample_record, "", "Data Scientist")
    assert partial.role_alignment == 50
    assert partial.suggestions == ['Consider adding experience related to "Data Scientist" role']
