"""
Static reference text appended to every readability report.

Describes the formulas GNU ``style`` reports and its word usage categories.
Headings are setext-style so the text reads the same as plain text and as
Markdown; each heading is a cross-reference anchor in structured reports.
"""

REFERENCE_ANCHORS = (
    "Kincaid",
    "ARI",
    "Coleman-Liau",
    "Flesch Index",
    "Fog Index",
    "Lix",
    "SMOG-Grading",
    "word usage",
)

REFERENCE_TEXT = """\
Reference
=========

The readability formulas below estimate how hard a text is to read from
counts of characters, syllables, words and sentences. Most of them report a
school grade; Flesch reports an ease score instead.

Kincaid
-------

Developed for US Navy training manuals ranging in difficulty from grade 5.5
to 16.3. It suits technical documents best, being based on adult training
material rather than school books. Dialogue with many short sentences scores
low, while scientific text full of long terms scores high even for readers
who know those terms.

    Kincaid = 11.8*syllables/wds + 0.39*wds/sentences - 15.59

ARI
---

The Automated Readability Index is usually higher than Kincaid and
Coleman-Liau, and lower than Flesch.

    ARI = 4.71*chars/wds + 0.5*wds/sentences - 21.43

Coleman-Liau
------------

Usually gives a lower grade than Kincaid, ARI and Flesch for technical
documents.

    Coleman-Liau = 5.879851*chars/wds - 29.587280*sentences/wds - 15.800804

Flesch Index
------------

Flesch Reading Ease, published in 1948 and based on school texts for grades
3 to 12. The score usually lies between 0 (hard) and 100 (easy); typical
English prose averages 60 to 70. It does not transfer well to languages with
a different structure, such as German.

    Flesch Index = 206.835 - 84.6*syllables/wds - 1.015*wds/sentences

Fog Index
---------

Robert Gunning's Fog Index yields a school grade. Around 7 or 8 is ideal;
above 12 the writing reads as too complex for most audiences.

    Fog Index = 0.4*(wds/sentences + 100*(wds >= 3 syllables)/wds)

Lix
---

Developed by Bjoernsson in Sweden. The index maps to a school year through a
table.

    Lix = wds/sentences + 100*(wds >= 6 chars)/wds

    Index        34  38  41  44  48  51  54  57
    School year   5   6   7   8   9  10  11  12

SMOG-Grading
------------

McLaughlin's 1969 SMOG grading for English text yields a school grade.
Bamberger and Vanecek adapted it to German in 1984 by replacing the constant
+3 with -2.

    SMOG-Grading = sqrt(30*(wds >= 3 syllables)/sentences) + 3

Word usage
----------

The word usage counts help spot overuse of particular parts of speech.

Verb types
:   Forms of "to be", other auxiliary verbs, and infinitives. Passive
    sentences and heavy auxiliary use make text weaker.

Pronouns
:   Frequent pronouns can hide who is doing what.

Conjunctions
:   Many conjunctions suggest long, chained sentences.

Nominalizations
:   Nouns built from verbs (-tion, -ment, -ence, -ance) that often replace a
    stronger verb.

Prepositions
:   Long strings of prepositional phrases slow the reader down.

Sentence beginnings
:   Counts of sentences opening with pronouns, interrogatives, articles,
    subordinating conjunctions, conjunctions and prepositions. Varied
    openings read better.
"""
