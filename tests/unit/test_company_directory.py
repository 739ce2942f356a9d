"""
Unit tests for company directory filtering, sorting and aggregation
"""

from factories import make_company

from equity_jobs.company_directory import (
    DirectoryStats,
    aggregate_stats,
    all_locations_text,
    all_work_types_text,
    capitalize_work_type,
    filter_by_city,
    filter_by_work_arrangement,
    filter_excluding_major_cities,
    promote_work_type,
    select_primary_location_display,
    select_work_type_display,
    sort_by_name,
)
from equity_jobs.models.company import Company
from equity_jobs.views import MAJOR_CITIES


def _names(companies) -> list[str]:
    return [c.name for c in companies]


class TestFilterByCity:
    """Test city filtering"""

    def test_matches_secondary_location(self):
        """Test a company is found through any of its listed cities"""
        zeta = make_company("Zeta", location="Perth")
        acme = make_company("Acme", location="Sydney", all_locations=["Sydney", "Melbourne"])

        assert filter_by_city([zeta, acme], "melbourne") == (acme,)

    def test_case_insensitive(self, sample_companies):
        """Test every case variant of the city returns the same companies"""
        expected = filter_by_city(sample_companies, "Sydney")

        for variant in ["sydney", "SYDNEY", "sYdNeY"]:
            assert filter_by_city(sample_companies, variant) == expected

        assert _names(expected) == ["Acme"]

    def test_primary_location_only(self):
        """Test a record without allLocations still matches on its location"""
        company = Company(
            id="1", name="Solo", website="solo.com", location="Adelaide", work_type="Remote"
        )

        assert filter_by_city([company], "adelaide") == (company,)

    def test_unknown_city_returns_empty(self, sample_companies):
        """Test unknown city yields empty result, not an error"""
        assert filter_by_city(sample_companies, "Atlantis") == ()

    def test_preserves_input_order(self, sample_companies):
        """Test filtering keeps dataset order"""
        companies = [
            make_company("B", location="Perth"),
            make_company("A", location="Perth"),
        ]

        assert _names(filter_by_city(companies, "perth")) == ["B", "A"]

    def test_does_not_match_substring(self):
        """Test 'Perth' doesn't match 'Perth Hills'"""
        company = make_company("Hills", location="Perth Hills")

        assert filter_by_city([company], "perth") == ()


class TestFilterByWorkArrangement:
    """Test work arrangement filtering"""

    def test_remote_includes_secondary_work_type(self, sample_companies):
        """Test companies offering remote as a secondary option are included"""
        result = filter_by_work_arrangement(sample_companies, "remote")

        assert _names(result) == ["Acme", "beacon"]

    def test_case_insensitive(self, sample_companies):
        """Test arrangement matching ignores case"""
        assert filter_by_work_arrangement(sample_companies, "ON-SITE") == (sample_companies[0],)

    def test_no_match(self, sample_companies):
        """Test unknown arrangement returns empty tuple"""
        assert filter_by_work_arrangement(sample_companies, "Four-day week") == ()


class TestFilterExcludingMajorCities:
    """Test the 'other cities' filter"""

    def test_excludes_any_major_location(self, sample_companies):
        """Test a regional company with one capital-city office is excluded"""
        result = filter_excluding_major_cities(sample_companies, MAJOR_CITIES)

        # Coastal is in Newcastle but also Brisbane
        assert _names(result) == ["beacon", "Delta"]

    def test_never_returns_major_city_company(self, sample_companies):
        """Test no returned company has a primary or secondary major city"""
        majors = {city.lower() for city in MAJOR_CITIES}

        for company in filter_excluding_major_cities(sample_companies, MAJOR_CITIES):
            assert company.location.lower() not in majors
            assert not any(loc.lower() in majors for loc in company.all_locations)

    def test_exclusion_set_case_insensitive(self):
        """Test lowercase exclusion set still matches capitalized data"""
        company = make_company("Acme", location="Sydney")

        assert filter_excluding_major_cities([company], ["sydney"]) == ()

    def test_empty_exclusion_set_keeps_all(self, sample_companies):
        """Test nothing is excluded without major cities"""
        assert filter_excluding_major_cities(sample_companies, []) == sample_companies


class TestSortByName:
    """Test alphabetical sorting"""

    def test_sorts_case_insensitively(self, sample_companies):
        """Test lowercase names sort among capitalized names"""
        result = sort_by_name(sample_companies)

        assert _names(result) == ["Acme", "beacon", "Coastal", "Delta", "Zeta"]

    def test_example_order(self):
        """Test Acme sorts before Zeta"""
        zeta = make_company("Zeta", location="Perth")
        acme = make_company("Acme", location="Sydney", all_locations=["Sydney", "Melbourne"])

        assert sort_by_name([zeta, acme]) == (acme, zeta)

    def test_stable_for_case_ties(self):
        """Test names equal ignoring case keep input order"""
        first = make_company("acme", company_id="1")
        second = make_company("ACME", company_id="2")
        third = make_company("Acme", company_id="3")

        assert sort_by_name([first, second, third]) == (first, second, third)
        assert sort_by_name([third, first, second]) == (third, first, second)

    def test_idempotent(self, sample_companies):
        """Test sorting a sorted sequence changes nothing"""
        once = sort_by_name(sample_companies)

        assert sort_by_name(once) == once

    def test_does_not_mutate_input(self):
        """Test the input list is left untouched"""
        companies = [make_company("Zeta"), make_company("Acme")]
        original = list(companies)

        sort_by_name(companies)

        assert companies == original


class TestAggregateStats:
    """Test stats aggregation"""

    def test_empty_collection(self):
        """Test empty input yields all zeros"""
        assert aggregate_stats([]) == DirectoryStats(0, 0, 0)

    def test_example(self):
        """Test distinct cities and work types across companies"""
        companies = [
            make_company("A", location="Sydney", work_type="Remote"),
            make_company(
                "B",
                location="Sydney",
                work_type="Hybrid",
                all_locations=["Sydney", "Perth"],
            ),
        ]

        stats = aggregate_stats(companies)

        assert stats.to_dict() == {
            "companiesCount": 2,
            "citiesCount": 2,
            "workArrangementsCount": 2,
        }

    def test_ignores_blank_values(self):
        """Test empty and whitespace-only entries are not counted"""
        company = make_company(
            "A", all_locations=["Sydney", "", "  "], all_work_types=["Remote", " "]
        )

        stats = aggregate_stats([company])

        assert stats.cities_count == 1
        assert stats.work_arrangements_count == 1

    def test_distinct_by_exact_value(self):
        """Test differently cased values are counted separately"""
        companies = [
            make_company("A", location="Sydney"),
            make_company("B", location="sydney"),
        ]

        assert aggregate_stats(companies).cities_count == 2

    def test_missing_lists_fall_back_to_primary(self):
        """Test records without lists count their primary values"""
        company = Company(
            id="1", name="Solo", website="solo.com", location="Darwin", work_type="On-site"
        )

        stats = aggregate_stats([company])

        assert stats == DirectoryStats(1, 1, 1)

    def test_sample(self, sample_companies):
        """Test counts over the sample directory"""
        stats = aggregate_stats(sample_companies)

        # Perth, Sydney, Melbourne, Geelong, Newcastle, Brisbane, Hobart
        assert stats.cities_count == 7
        # On-site, Hybrid, Remote
        assert stats.work_arrangements_count == 3
        assert stats.companies_count == 5


class TestLocationDisplay:
    """Test card location label"""

    def test_single_location(self):
        """Test single location shows the location"""
        assert select_primary_location_display(make_company("A", location="Perth")) == "Perth"

    def test_current_city_preferred(self):
        """Test the browsed city leads the label"""
        company = make_company("A", location="Sydney", all_locations=["Sydney", "Melbourne"])

        assert select_primary_location_display(company, "melbourne") == "Melbourne + 1"

    def test_falls_back_to_first_listed(self):
        """Test first listed city is used without a matching current city"""
        company = make_company(
            "A", location="Sydney", all_locations=["Brisbane", "Sydney", "Perth"]
        )

        assert select_primary_location_display(company) == "Brisbane + 2"
        assert select_primary_location_display(company, "Hobart") == "Brisbane + 2"

    def test_missing_list_uses_location(self):
        """Test a record without allLocations shows its location"""
        company = Company(id="1", name="A", website="a.com", location="Darwin", work_type="Remote")

        assert select_primary_location_display(company, "darwin") == "Darwin"

    def test_all_locations_text(self):
        """Test tooltip text joins locations"""
        multi = make_company("A", location="Sydney", all_locations=["Sydney", "Melbourne"])
        single = make_company("B", location="Perth")

        assert all_locations_text(multi) == "Sydney, Melbourne"
        assert all_locations_text(single) == "Perth"


class TestWorkTypeDisplay:
    """Test card work type label"""

    def test_single_work_type(self):
        """Test single work type shows it unchanged"""
        assert select_work_type_display(make_company("A", work_type="Remote")) == "Remote"

    def test_multiple_work_types(self):
        """Test primary plus a count of the rest"""
        company = make_company(
            "A", work_type="Hybrid", all_work_types=["Remote", "Hybrid", "On-site"]
        )

        assert select_work_type_display(company) == "Hybrid + 2"

    def test_all_work_types_text(self):
        """Test tooltip text joins work types"""
        company = make_company("A", work_type="Hybrid", all_work_types=["Hybrid", "Remote"])

        assert all_work_types_text(company) == "Hybrid, Remote"
        assert all_work_types_text(make_company("B", work_type="Remote")) == "Remote"

    def test_capitalize_work_type(self):
        """Test first letter upper, rest lower"""
        assert capitalize_work_type("on-site") == "On-site"
        assert capitalize_work_type("REMOTE") == "Remote"
        assert capitalize_work_type("") == ""


class TestPromoteWorkType:
    """Test promoting an arrangement to primary"""

    def test_moves_arrangement_first(self):
        """Test the arrangement leads and others keep order"""
        company = make_company(
            "A", work_type="Hybrid", all_work_types=["Hybrid", "On-site", "Remote"]
        )

        promoted = promote_work_type(company, "Remote")

        assert promoted.work_type == "Remote"
        assert promoted.all_work_types == ("Remote", "Hybrid", "On-site")
        # Original untouched
        assert company.work_type == "Hybrid"

    def test_missing_list(self):
        """Test a record without work types gets just the arrangement"""
        company = Company(id="1", name="A", website="a.com", location="Perth", work_type="Remote")

        assert promote_work_type(company, "Remote").all_work_types == ("Remote",)
