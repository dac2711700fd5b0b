from qm_simplifier.quine_mccluskey import (
    variable_count,
    seed_terms,
    find_prime_implicants,
    build_coverage_chart,
    find_essential_prime_implicants,
    uncovered_minterms,
    non_essential_prime_implicants,
)


def patterns(terms):
    return [t.pattern for t in terms]


def primes_for(minterms):
    return find_prime_implicants(seed_terms(minterms, variable_count(minterms)))


def test_variable_count_follows_largest_minterm():
    assert variable_count([1, 2]) == 2
    assert variable_count([1, 2, 7]) == 3
    assert variable_count([8]) == 4
    assert variable_count([0]) == 1


def test_seed_terms_drop_duplicates():
    seeds = seed_terms([3, 1, 3], 2)
    assert patterns(seeds) == ["11", "01"]


def test_prime_implicants_full_merge():
    primes = primes_for([0, 2, 4, 6])
    assert patterns(primes) == ["--0"]
    assert primes[0].minterms == frozenset({0, 2, 4, 6})


def test_prime_implicants_cyclic_function():
    primes = primes_for([0, 1, 2, 5, 6, 7])
    assert patterns(primes) == ["-01", "-10", "0-0", "00-", "1-1", "11-"]


def test_prime_implicants_without_merges():
    assert patterns(primes_for([1, 2, 7])) == ["001", "010", "111"]


def test_prime_implicants_do_not_depend_on_input_order():
    assert patterns(primes_for([7, 6, 5, 2, 1, 0])) == patterns(primes_for([0, 1, 2, 5, 6, 7]))


def test_prime_implicants_never_add_minterms():
    minterms = [0, 1, 2, 5, 6, 7, 15]
    for term in primes_for(minterms):
        assert term.minterms <= set(minterms)


def test_prime_implicants_empty():
    assert find_prime_implicants([]) == []


def test_coverage_chart():
    primes = primes_for([0, 1, 3, 7])
    chart = build_coverage_chart(primes, [0, 1, 3, 7])

    assert set(chart) == {0, 1, 3, 7}
    assert patterns(chart[0]) == ["00-"]
    assert set(patterns(chart[1])) == {"00-", "0-1"}
    assert set(patterns(chart[3])) == {"0-1", "-11"}
    assert patterns(chart[7]) == ["-11"]


def test_essential_prime_implicants():
    minterms = [0, 1, 3, 7]
    primes = primes_for(minterms)
    essentials = find_essential_prime_implicants(primes, minterms)

    assert patterns(essentials) == ["-11", "00-"]
    assert uncovered_minterms(essentials, minterms) == []
    assert patterns(non_essential_prime_implicants(primes, essentials)) == ["0-1"]


def test_no_essentials_in_cyclic_function():
    minterms = [0, 1, 2, 5, 6, 7]
    primes = primes_for(minterms)
    essentials = find_essential_prime_implicants(primes, minterms)

    assert essentials == []
    assert uncovered_minterms(essentials, minterms) == minterms
    assert len(non_essential_prime_implicants(primes, essentials)) == 6


def test_uncovered_minterms_keep_input_order():
    minterms = [15, 6, 0, 7, 5, 2, 1]
    primes = primes_for(minterms)
    essentials = find_essential_prime_implicants(primes, minterms)

    assert patterns(essentials) == ["-111"]
    assert uncovered_minterms(essentials, minterms) == [6, 0, 5, 2, 1]
